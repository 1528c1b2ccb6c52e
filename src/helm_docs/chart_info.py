"""Chart file readers -- Chart.yaml, dependencies, and values.yaml."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from loguru import logger

from .comments import parse_values_file_comments
from .errors import ChartParseError
from .files import read_chart_file
from .models import (
    DEFAULT_CHART_FILE,
    DEFAULT_REQUIREMENTS_FILE,
    DEFAULT_VALUES_FILE,
    LEGACY_API_VERSION,
    ChartDocumentationInfo,
    ChartMeta,
    ChartRequirement,
)

log = logger.bind(stage="chart_info")


def _load_yaml_mapping(path: Path) -> dict[Any, Any]:
    """Read a YAML file whose top level must be a mapping (or empty)."""
    contents = read_chart_file(path)
    try:
        data = yaml.safe_load(contents)
    except yaml.YAMLError as exc:
        log.error(f"Failed to parse {path}: {exc}")
        raise ChartParseError(path, str(exc)) from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ChartParseError(path, f"expected a mapping, got {type(data).__name__}")
    return data


def parse_chart_file(
    chart_directory: Path,
    chart_file: str = DEFAULT_CHART_FILE,
) -> ChartMeta:
    chart_path = chart_directory / chart_file
    log.debug(f"parse_chart_file(chart_path={chart_path})")
    return ChartMeta.from_dict(_load_yaml_mapping(chart_path))


def parse_chart_requirements(
    chart_directory: Path,
    api_version: str,
    chart_file: str = DEFAULT_CHART_FILE,
    requirements_file: str = DEFAULT_REQUIREMENTS_FILE,
) -> list[ChartRequirement]:
    """Read chart dependencies, sorted by repository/name.

    apiVersion v1 charts list them in requirements.yaml, which is optional.
    Newer charts list them under `dependencies` in Chart.yaml.
    """
    if api_version == LEGACY_API_VERSION:
        requirements_path = chart_directory / requirements_file
        if not requirements_path.exists():
            log.debug(f"No {requirements_file} in {chart_directory}")
            return []
    else:
        requirements_path = chart_directory / chart_file

    log.debug(f"parse_chart_requirements(requirements_path={requirements_path})")
    data = _load_yaml_mapping(requirements_path)

    dependencies = data.get("dependencies") or []
    if not isinstance(dependencies, list):
        raise ChartParseError(requirements_path, "'dependencies' must be a list")

    requirements = [
        ChartRequirement.from_dict(d) for d in dependencies if isinstance(d, dict)
    ]
    return sorted(requirements, key=lambda r: r.sort_key)


def parse_chart_values(
    chart_directory: Path,
    values_file: str = DEFAULT_VALUES_FILE,
) -> dict[Any, Any]:
    values_path = chart_directory / values_file
    log.debug(f"parse_chart_values(values_path={values_path})")
    return _load_yaml_mapping(values_path)


def parse_chart_information(
    chart_directory: Path,
    chart_file: str = DEFAULT_CHART_FILE,
    requirements_file: str = DEFAULT_REQUIREMENTS_FILE,
    values_file: str = DEFAULT_VALUES_FILE,
) -> ChartDocumentationInfo:
    """Parse everything needed to document one chart.

    Stops at the first failing file and propagates its HelmDocsError.
    """
    log.debug(f"parse_chart_information(chart_directory={chart_directory})")

    meta = parse_chart_file(chart_directory, chart_file)
    dependencies = parse_chart_requirements(
        chart_directory,
        meta.api_version,
        chart_file=chart_file,
        requirements_file=requirements_file,
    )
    values = parse_chart_values(chart_directory, values_file)
    descriptions = parse_values_file_comments(chart_directory, values_file)

    log.info(
        f"Parsed chart {meta.name or chart_directory.name}: "
        f"{len(dependencies)} dependencies, {len(descriptions)} documented values"
    )
    return ChartDocumentationInfo(
        chart_directory=chart_directory,
        meta=meta,
        dependencies=dependencies,
        values=values,
        value_descriptions=descriptions,
    )
