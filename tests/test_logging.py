import logging

from inputforge.utils.logging import configure_logging, get_logger


def test_get_logger_nests_under_package() -> None:
    assert get_logger("synth.domain").name == "inputforge.synth.domain"
    assert get_logger("inputforge.corpus").name == "inputforge.corpus"
    assert get_logger("inputforge").name == "inputforge"


def test_configure_logging_is_idempotent() -> None:
    logger = configure_logging("DEBUG")
    count = len(logger.handlers)
    configure_logging(logging.INFO)
    assert len(logger.handlers) == count
    assert logger.level == logging.INFO
    configure_logging("WARNING")
