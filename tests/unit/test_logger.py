"""Tests for the logging defaults."""

import pytest
import structlog
from structlog.testing import capture_logs

from citation_grounding.observability.logger import get_logger, setup_logging


@pytest.fixture
def unconfigured_structlog():
    saved = structlog.get_config()
    structlog.reset_defaults()
    yield
    structlog.configure(**saved)


def test_library_default_only_passes_warnings(unconfigured_structlog):
    logger = get_logger("library")
    with capture_logs() as logs:
        logger.info("citation_validated")
        logger.debug("corpus_indexed")
        logger.warning("validation_timeout")
    assert [entry["event"] for entry in logs] == ["validation_timeout"]


def test_setup_logging_overrides_library_default(unconfigured_structlog):
    logger = get_logger("service")
    setup_logging("INFO")
    with capture_logs() as logs:
        logger.info("request_completed")
    assert [entry["event"] for entry in logs] == ["request_completed"]
