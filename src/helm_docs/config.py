"""helm-docs configuration via pydantic-settings (.env + env vars)."""

import os
import sys
from pathlib import Path

from loguru import logger
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigError
from .models import DEFAULT_CHART_FILE, DEFAULT_REQUIREMENTS_FILE, DEFAULT_VALUES_FILE

LOG_LEVELS = frozenset({"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"})


class DocsConfig(BaseSettings):
    """All helm-docs configuration with layered resolution:
    .env file < environment variables < constructor kwargs.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    # -- Chart file names --
    chart_file: str = DEFAULT_CHART_FILE
    requirements_file: str = DEFAULT_REQUIREMENTS_FILE
    values_file: str = DEFAULT_VALUES_FILE

    # -- Parallel parsing --
    max_workers: int = 0  # 0 = auto

    # -- Behavior --
    log_level: str = "INFO"
    log_file: str = ""  # empty = no file sink

    def resolve_workers(self, chart_count: int) -> int:
        """Worker count for a batch of chart_count charts (at least 1)."""
        workers = self.max_workers
        if workers <= 0:
            workers = min(32, (os.cpu_count() or 1) + 4)
        return max(1, min(workers, chart_count))

    def setup_logging(self) -> None:
        """Configure loguru for helm-docs.

        Raises ConfigError for a log_level loguru does not know.
        """
        level = self.log_level.upper()
        if level not in LOG_LEVELS:
            raise ConfigError(f"Unknown log level: {self.log_level}")

        logger.remove()  # Remove default stderr handler

        log_format = (
            "{time:YYYY-MM-DDTHH:mm:ssZ} | {level:<8} | "
            "{extra[stage]:<12} | {message}"
        )

        def _default_extra(record):
            record["extra"].setdefault("stage", "")
            return True

        logger.add(
            sys.stderr,
            format=log_format,
            level=level,
            filter=_default_extra,
        )

        if not self.log_file:
            return

        log_path = Path(self.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            str(log_path),
            format=log_format,
            level="DEBUG",
            rotation="10 MB",
            retention="30 days",
            filter=_default_extra,
        )
