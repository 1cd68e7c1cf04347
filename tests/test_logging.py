from __future__ import annotations

import pytest
import structlog
from structlog.testing import capture_logs

from core.logging import configure_logging


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()


def test_configure_logging_filters_below_level():
    configure_logging("warning")

    with capture_logs() as logs:
        log = structlog.get_logger()
        log.info("seller_search_started")
        log.warning("seller_search_failed", error="locked")

    assert [entry["event"] for entry in logs] == ["seller_search_failed"]
    assert logs[0]["error"] == "locked"


def test_configure_logging_falls_back_to_info_for_unknown_level():
    configure_logging("chatty")

    with capture_logs() as logs:
        log = structlog.get_logger()
        log.debug("hidden")
        log.info("shown")

    assert [entry["event"] for entry in logs] == ["shown"]
