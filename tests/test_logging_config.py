import logging

from fourierfun.logging_config import setup_logging
from fourierfun.model.series import SeriesSpec


def test_setup_logging_writes_package_records(tmp_path):
    log_file = tmp_path / "app.log"
    setup_logging(level=logging.DEBUG, log_file=str(log_file))
    logger = logging.getLogger("fourierfun")
    try:
        SeriesSpec().declare_count(2)
        for handler in logger.handlers:
            handler.flush()
        text = log_file.read_text(encoding="utf-8")
        assert "Logging initialized." in text
        assert "fourierfun.model.series - DEBUG - Declared 2 components" in text
    finally:
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)


def test_setup_logging_does_not_duplicate_handlers():
    setup_logging()
    setup_logging()
    logger = logging.getLogger("fourierfun")
    try:
        assert len(logger.handlers) == 1
    finally:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)


def test_plotting_libraries_stay_quiet_in_debug():
    setup_logging(level=logging.DEBUG)
    logger = logging.getLogger("fourierfun")
    try:
        assert logger.level == logging.DEBUG
        assert logging.getLogger("matplotlib").level == logging.WARNING
        assert logging.getLogger("pyqtgraph").level == logging.WARNING
    finally:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)
        for name in ("matplotlib", "PIL", "pyqtgraph"):
            logging.getLogger(name).setLevel(logging.NOTSET)
