"""Tests for loguru-based helm-docs logging."""

import pytest
from loguru import logger

from helm_docs.config import DocsConfig
from helm_docs.errors import ConfigError


class TestSetupLogging:
    def setup_method(self):
        logger.remove()

    def test_no_file_sink_by_default(self, tmp_path, monkeypatch):
        monkeypatch.delenv("LOG_FILE", raising=False)
        monkeypatch.chdir(tmp_path)
        config = DocsConfig(_env_file=None)
        config.setup_logging()
        logger.info("stderr only")
        assert list(tmp_path.iterdir()) == []

    def test_setup_creates_log_dir(self, tmp_path):
        log_file = tmp_path / "logs" / "helm-docs.log"
        config = DocsConfig(_env_file=None, log_file=str(log_file))
        config.setup_logging()
        assert log_file.parent.exists()

    def test_setup_adds_file_sink(self, tmp_path):
        log_file = tmp_path / "logs" / "helm-docs.log"
        config = DocsConfig(_env_file=None, log_file=str(log_file))
        config.setup_logging()
        logger.bind(stage="test").info("hello from test")
        assert log_file.exists()
        assert "hello from test" in log_file.read_text()

    def test_stage_context_in_output(self, tmp_path):
        log_file = tmp_path / "helm-docs.log"
        config = DocsConfig(_env_file=None, log_file=str(log_file))
        config.setup_logging()
        logger.bind(stage="comments").info("scanning")
        assert "comments" in log_file.read_text()

    def test_default_stage_empty(self, tmp_path):
        log_file = tmp_path / "helm-docs.log"
        config = DocsConfig(_env_file=None, log_file=str(log_file))
        config.setup_logging()
        logger.info("no stage bound")
        assert "no stage bound" in log_file.read_text()

    def test_unknown_level_raises(self):
        config = DocsConfig(_env_file=None, log_level="chatty")
        with pytest.raises(ConfigError, match="Unknown log level"):
            config.setup_logging()

    def test_level_is_case_insensitive(self):
        config = DocsConfig(_env_file=None, log_level="warning")
        config.setup_logging()
