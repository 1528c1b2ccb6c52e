"""Core enums, constants, and type definitions for helm-docs.

Enums:
    ScanMode  -- Comment extractor state (searching, accumulating).

Dataclasses:
    ValueDescription        -- Description text plus optional default override.
    ChartMaintainer         -- One entry of Chart.yaml `maintainers`.
    ChartMeta               -- Chart.yaml metadata.
    ChartRequirement        -- One chart dependency.
    ValueRow                -- One row of the joined values table.
    ChartDocumentationInfo  -- Everything parsed from a single chart directory.
    BatchResult             -- Summary of a multi-chart parse.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import StrEnum
from pathlib import Path
from typing import Any


class ScanMode(StrEnum):
    SEARCHING = "searching"
    ACCUMULATING = "accumulating"


DEFAULT_CHART_FILE = "Chart.yaml"
DEFAULT_REQUIREMENTS_FILE = "requirements.yaml"
DEFAULT_VALUES_FILE = "values.yaml"

# Charts with this apiVersion keep dependencies in requirements.yaml
LEGACY_API_VERSION = "v1"


@dataclass(frozen=True)
class ValueDescription:
    """Documentation extracted for one values key."""

    description: str
    default: str | None = None


@dataclass
class ChartMaintainer:
    name: str = ""
    email: str = ""
    url: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ChartMaintainer:
        return cls(
            name=_as_str(data.get("name")),
            email=_as_str(data.get("email")),
            url=_as_str(data.get("url")),
        )


@dataclass
class ChartMeta:
    """Chart.yaml metadata. Source keys are camelCase, attributes snake_case."""

    api_version: str = ""
    name: str = ""
    version: str = ""
    kube_version: str = ""
    description: str = ""
    keywords: list[str] = field(default_factory=list)
    home: str = ""
    sources: list[str] = field(default_factory=list)
    maintainers: list[ChartMaintainer] = field(default_factory=list)
    type: str = ""
    engine: str = ""
    icon: str = ""
    app_version: str = ""
    deprecated: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ChartMeta:
        return cls(
            api_version=_as_str(data.get("apiVersion")),
            name=_as_str(data.get("name")),
            version=_as_str(data.get("version")),
            kube_version=_as_str(data.get("kubeVersion")),
            description=_as_str(data.get("description")),
            keywords=_as_str_list(data.get("keywords")),
            home=_as_str(data.get("home")),
            sources=_as_str_list(data.get("sources")),
            maintainers=[
                ChartMaintainer.from_dict(m)
                for m in data.get("maintainers") or []
                if isinstance(m, dict)
            ],
            type=_as_str(data.get("type")),
            engine=_as_str(data.get("engine")),
            icon=_as_str(data.get("icon")),
            app_version=_as_str(data.get("appVersion")),
            deprecated=data.get("deprecated") is True,
        )


@dataclass
class ChartRequirement:
    name: str = ""
    version: str = ""
    repository: str = ""

    @property
    def sort_key(self) -> str:
        return f"{self.repository}/{self.name}"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ChartRequirement:
        return cls(
            name=_as_str(data.get("name")),
            version=_as_str(data.get("version")),
            repository=_as_str(data.get("repository")),
        )


@dataclass
class ValueRow:
    key: str
    type: str
    default: str
    description: str = ""


@dataclass
class ChartDocumentationInfo:
    chart_directory: Path
    meta: ChartMeta
    dependencies: list[ChartRequirement] = field(default_factory=list)
    values: dict[Any, Any] = field(default_factory=dict)
    value_descriptions: dict[str, ValueDescription] = field(default_factory=dict)

    def value_rows(self) -> list[ValueRow]:
        from .values_table import build_value_rows

        return build_value_rows(self.values, self.value_descriptions)

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready view: metadata, dependencies and the joined values table."""
        return {
            "chart_directory": str(self.chart_directory),
            "meta": asdict(self.meta),
            "dependencies": [asdict(d) for d in self.dependencies],
            "values": [asdict(r) for r in self.value_rows()],
        }


@dataclass
class BatchResult:
    """Result summary from a multi-chart parse run."""

    completed: int = 0
    failed: int = 0
    total: int = 0
    charts: list[ChartDocumentationInfo] = field(default_factory=list)
    failed_dirs: list[Path] = field(default_factory=list)


def _as_str(value: Any) -> str:
    # YAML turns bare versions like 1.0 into floats
    if value is None:
        return ""
    return str(value)


def _as_str_list(value: Any) -> list[str]:
    # a scalar stands for a one-element list
    if value is None:
        return []
    if not isinstance(value, list):
        return [_as_str(value)]
    return [_as_str(v) for v in value]
