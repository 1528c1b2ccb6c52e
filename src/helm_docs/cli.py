"""CLI entry point for helm-docs."""

import json
import os
from pathlib import Path

import click
from loguru import logger

from .batch import ChartBatch
from .config import DocsConfig
from .errors import ConfigError

log = logger.bind(stage="cli")


def _find_config_file() -> Path | None:
    """Look for .env in cwd."""
    candidate = Path.cwd() / ".env"
    return candidate if candidate.is_file() else None


def _load_env_file(env_file: Path) -> None:
    """Load a shell-style .env file into os.environ (without overriding)."""
    for line in env_file.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, _, value = line.partition("=")
        key = key.strip()
        value = value.strip()
        # Strip quotes
        if (value.startswith('"') and value.endswith('"')) or (
            value.startswith("'") and value.endswith("'")
        ):
            value = value[1:-1]
        # Skip bash variable expansions like ${VAR:-default}
        if "${" in value:
            continue
        # Don't override existing env vars (CLI > env > file)
        if key not in os.environ:
            os.environ[key] = value


@click.command()
@click.argument(
    "chart_dirs",
    nargs=-1,
    required=True,
    type=click.Path(exists=True, file_okay=False),
)
@click.option("--chart-file", default=None, help="Chart metadata file name (default Chart.yaml).")
@click.option(
    "--requirements-file",
    default=None,
    help="Dependency file name for apiVersion v1 charts (default requirements.yaml).",
)
@click.option("--values-file", default=None, help="Values file name (default values.yaml).")
@click.option("-j", "--jobs", type=int, default=None, help="Parallel workers. 0 = auto.")
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write JSON to this file instead of stdout.",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.option(
    "-c",
    "--config",
    "config_file",
    type=click.Path(exists=True),
    default=None,
    help="Path to .env file.",
)
def main(
    chart_dirs: tuple[str, ...],
    chart_file: str | None,
    requirements_file: str | None,
    values_file: str | None,
    jobs: int | None,
    output: str | None,
    verbose: bool,
    config_file: str | None,
) -> None:
    """Extract documentation data (metadata, dependencies, documented values) from Helm charts."""
    env_file = Path(config_file) if config_file else _find_config_file()
    if env_file and env_file.is_file():
        _load_env_file(env_file)
        log.debug(f"Loaded env from {env_file}")
    else:
        log.debug("No .env found")

    # Pass CLI flags as kwargs to avoid env pollution
    config_kwargs: dict[str, str | int] = {}
    if chart_file:
        config_kwargs["chart_file"] = chart_file
    if requirements_file:
        config_kwargs["requirements_file"] = requirements_file
    if values_file:
        config_kwargs["values_file"] = values_file
    if jobs is not None:
        config_kwargs["max_workers"] = jobs
    if verbose:
        config_kwargs["log_level"] = "DEBUG"

    config = DocsConfig(**config_kwargs)  # type: ignore[arg-type]
    try:
        config.setup_logging()
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc

    dirs = [Path(d).resolve() for d in chart_dirs]
    result = ChartBatch(config).run(dirs)

    payload = json.dumps([info.to_dict() for info in result.charts], indent=2)
    if output:
        Path(output).write_text(payload + "\n")
        log.info(f"Wrote documentation data for {result.completed} charts to {output}")
    else:
        click.echo(payload)

    if result.failed:
        failed = ", ".join(str(d) for d in result.failed_dirs)
        click.echo(f"Failed to parse {result.failed} chart(s): {failed}", err=True)
        raise SystemExit(1)
