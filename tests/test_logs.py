import logging

from comingsoon.logs import configure_logging


def test_configure_logging_is_idempotent():
    logger = configure_logging("debug")
    configure_logging("warning")
    ours = [h for h in logger.handlers if getattr(h, "_comingsoon", False)]
    assert len(ours) == 1
    assert logger.level == logging.WARNING


def test_unknown_level_falls_back_to_info():
    assert configure_logging("chatty").level == logging.INFO
