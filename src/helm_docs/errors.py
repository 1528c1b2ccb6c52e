"""Exception hierarchy for helm-docs."""

from pathlib import Path


class HelmDocsError(Exception):
    """Base exception for all helm-docs errors."""


class ConfigError(HelmDocsError):
    """Invalid or missing configuration."""


class ChartFileError(HelmDocsError):
    """A chart file could not be opened or read."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot read chart file {path}: {reason}")
        self.path = path
        self.reason = reason


class ChartFileMissingError(ChartFileError):
    """A required chart file does not exist."""

    def __init__(self, path: Path) -> None:
        super().__init__(path, "file does not exist")


class ChartParseError(HelmDocsError):
    """A chart file is not valid YAML or has the wrong shape."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Invalid chart file {path}: {reason}")
        self.path = path
        self.reason = reason
