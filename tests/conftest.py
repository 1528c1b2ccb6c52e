"""Shared fixtures -- on-disk chart directories."""

import textwrap
from pathlib import Path

import pytest

CHART_YAML = """\
apiVersion: v2
name: web
version: 1.2.0
appVersion: "2.0"
kubeVersion: ">=1.19"
description: A web server
type: application
home: https://example.com/web
sources:
  - https://github.com/example/web
maintainers:
  - name: Jo
    email: jo@example.com
dependencies:
  - name: redis
    version: 10.0.0
    repository: https://charts.example.com
  - name: cache
    version: 1.0.0
    repository: https://a.example.com
"""

VALUES_YAML = """\
# replicaCount -- Number of replicas to deploy
replicaCount: 3

image:
  # image.repository -- Image repository
  repository: nginx
  # image.tag -- The image tag to use
  # @default -- "latest"
  tag: stable

resources: {}
"""


def _write_chart(root: Path, files: dict[str, str]) -> Path:
    root.mkdir(parents=True, exist_ok=True)
    for name, content in files.items():
        (root / name).write_text(textwrap.dedent(content))
    return root


@pytest.fixture
def make_chart(tmp_path):
    """Factory: make_chart(name, {file: content}) -> chart directory."""

    def _make(name: str = "web", files: dict[str, str] | None = None) -> Path:
        if files is None:
            files = {"Chart.yaml": CHART_YAML, "values.yaml": VALUES_YAML}
        return _write_chart(tmp_path / name, files)

    return _make
