import logging

from advising.logger import LOGGER_NAME, setup_logging


def test_setup_is_idempotent():
    logger = setup_logging("DEBUG")
    again = setup_logging("DEBUG")
    assert logger is again
    assert logger.name == LOGGER_NAME
    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG


def test_rotating_file(tmp_path):
    log_file = tmp_path / "advising.log"
    logger = setup_logging("INFO", log_file=str(log_file))
    logging.getLogger("advising.loader").warning("Invalid course line 3 (skipped): BADLINE")
    for h in logger.handlers:
        h.flush()
    assert "BADLINE" in log_file.read_text(encoding="utf-8")
