# tests/test_logging_config.py
import io
import logging

from dessertclicker.logging_config import LOGGER_NAME, setup_logging


def test_setup_logging_writes_to_stream_and_file(tmp_path):
    stream = io.StringIO()
    log_file = tmp_path / "app.log"

    logger = setup_logging(level=logging.DEBUG, log_file=str(log_file), stream=stream)
    logging.getLogger(f"{LOGGER_NAME}.model.state").debug("Session state has been reset.")
    for handler in logger.handlers:
        handler.flush()

    assert "Session state has been reset." in stream.getvalue()
    assert "Session state has been reset." in log_file.read_text(encoding="utf-8")
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()


def test_setup_logging_twice_does_not_duplicate_handlers():
    setup_logging(stream=io.StringIO())
    logger = setup_logging(stream=io.StringIO())
    assert len(logger.handlers) == 1
    logger.handlers.clear()
