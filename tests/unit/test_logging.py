"""Tests for logging setup."""

import sys

import pytest
from loguru import logger

from settings.logging import from_project, setup_logging


@pytest.fixture
def restore_logger():
    yield
    logger.remove()
    logger.add(sys.stderr)


class TestConsoleFilter:
    def test_project_modules_pass(self):
        assert from_project({"name": "app.services.resolver.service"})
        assert from_project({"name": "content_client.base"})

    def test_dependencies_filtered(self):
        assert not from_project({"name": "httpx._client"})
        assert not from_project({"name": None})


class TestSetup:
    def test_file_sink_in_log_dir(self, tmp_path, restore_logger):
        log_dir = tmp_path / "logs"
        setup_logging(level="warning", to_file=True, log_dir=log_dir)
        logger.complete()
        files = list(log_dir.glob("content_*.log"))
        assert len(files) == 1
        assert "Content log in" in files[0].read_text()

    def test_console_only(self, tmp_path, restore_logger):
        setup_logging(to_file=False, log_dir=tmp_path / "logs")
        assert not (tmp_path / "logs").exists()
