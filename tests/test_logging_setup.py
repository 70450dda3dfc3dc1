"""
Tests for logging setup.
"""

import logging
from logging.handlers import RotatingFileHandler

from hsacl.logging_setup import setup_logging


class TestSetupLogging:
    def test_console_handler_only_by_default(self):
        logger = setup_logging("INFO")

        assert logger.name == "hsacl"
        assert logger.level == logging.INFO
        assert logger.propagate is False
        assert len(logger.handlers) == 1
        assert not isinstance(logger.handlers[0], RotatingFileHandler)

    def test_idempotent(self):
        setup_logging("INFO")
        logger = setup_logging("DEBUG")

        assert len(logger.handlers) == 1
        assert logger.level == logging.DEBUG

    def test_unknown_level_falls_back_to_warning(self):
        assert setup_logging("chatty").level == logging.WARNING

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "nested" / "hsacl.log"
        logger = setup_logging("INFO", log_file)

        assert any(isinstance(h, RotatingFileHandler) for h in logger.handlers)
        logging.getLogger("hsacl.commands.apply").info("Applied profile '%s'", "office")

        assert "INFO [hsacl.commands.apply] Applied profile 'office'" in log_file.read_text()

    def test_child_loggers_reach_console(self, capsys):
        setup_logging("WARNING")
        logging.getLogger("hsacl.cli").warning("something odd")
        logging.getLogger("hsacl.cli").info("hidden")

        err = capsys.readouterr().err
        assert "WARNING [hsacl.cli] something odd" in err
        assert "hidden" not in err
