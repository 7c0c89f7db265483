import structlog
from structlog.testing import capture_logs

from sacn_stream.core.logging import configure_logging


def test_configure_logging_filters_below_level() -> None:
    configure_logging("WARNING")
    try:
        with capture_logs() as logs:
            logger = structlog.get_logger()
            logger.info("dropped")
            logger.warning("kept", universe=1)

        assert [entry["event"] for entry in logs] == ["kept"]
        assert logs[0]["universe"] == 1
    finally:
        structlog.reset_defaults()


def test_configure_logging_unknown_level_falls_back_to_info() -> None:
    configure_logging("chatty")
    try:
        with capture_logs() as logs:
            logger = structlog.get_logger()
            logger.debug("dropped")
            logger.info("kept")

        assert [entry["event"] for entry in logs] == ["kept"]
    finally:
        structlog.reset_defaults()
