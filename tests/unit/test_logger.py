import logging

import colorlog
import pytest

from hbsdcontrol.utils.logger import configure_logging_levels, get_logger, setup_logger


@pytest.mark.unit
def test_setup_logger_uses_colored_console_handler():
    logger = setup_logger("hbsdcontrol.test_setup")
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0].formatter, colorlog.ColoredFormatter)
    assert setup_logger("hbsdcontrol.test_setup").handlers == logger.handlers


@pytest.mark.unit
def test_setup_logger_with_log_file(tmp_path):
    log_file = tmp_path / "logs" / "hbsdcontrol.log"
    logger = setup_logger("hbsdcontrol.test_file", level=logging.DEBUG, log_file=str(log_file))
    logger.debug("written to file")
    for handler in logger.handlers:
        handler.flush()
    assert "written to file" in log_file.read_text()


@pytest.mark.unit
@pytest.mark.parametrize(
    ("verbose", "level"),
    [(0, logging.WARNING), (1, logging.INFO), (2, logging.DEBUG), (3, logging.DEBUG)],
)
def test_verbosity_levels(verbose, level):
    configure_logging_levels(verbose)
    try:
        assert get_logger().level == level
    finally:
        configure_logging_levels(0)
