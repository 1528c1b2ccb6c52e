"""Chart file reading shared by the chart and comment parsers."""

from pathlib import Path

from loguru import logger

from .errors import ChartFileError, ChartFileMissingError

log = logger.bind(stage="files")


def read_chart_file(path: Path) -> str:
    """Read a required chart file in one bulk read.

    Raises ChartFileMissingError if the file is absent and ChartFileError
    for any other OS-level failure. Nothing is returned on error.
    """
    log.debug(f"read_chart_file(path={path})")

    if not path.exists():
        log.warning(f"Required chart file {path} missing. Skipping documentation for chart")
        raise ChartFileMissingError(path)

    try:
        # newline="" keeps \r and other separators inside lines
        with path.open(encoding="utf-8", newline="") as fh:
            return fh.read()
    except (OSError, UnicodeDecodeError) as exc:
        log.warning(f"Error occurred in reading chart file {path}. Skipping documentation for chart")
        raise ChartFileError(path, str(exc)) from exc
