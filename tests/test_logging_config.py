import logging

from app.core.logging_config import HANDLER_NAME, configure_logging


def test_repeated_configuration_installs_one_handler():
    root = logging.getLogger()
    level = root.level
    try:
        configure_logging("debug")
        configure_logging("debug")
        assert [h.get_name() for h in root.handlers].count(HANDLER_NAME) == 1
        assert root.level == logging.DEBUG
    finally:
        root.setLevel(level)
