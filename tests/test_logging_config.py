"""
Tests for console logging setup.
"""

import inspect
import logging

from bin2obj.logging_config import setup_logging


class TestSetupLogging:
    """The bin2obj logger gets exactly one stdout handler."""

    def test_default_level_is_info(self):
        """Without verbose, per-record DEBUG dumps are filtered out."""
        logger = setup_logging()

        assert logger.name == "bin2obj"
        assert logger.level == logging.INFO
        assert [h.level for h in logger.handlers] == [logging.INFO]

    def test_verbose_level_is_debug(self):
        """Verbose mode lets DEBUG records through."""
        logger = setup_logging(verbose=True)

        assert logger.level == logging.DEBUG
        assert logger.handlers[0].level == logging.DEBUG

    def test_repeated_setup_keeps_single_stream_handler(self):
        """Calling setup twice replaces the handler instead of stacking a second one."""
        setup_logging()
        logger = setup_logging(verbose=True)

        assert len(logger.handlers) == 1
        assert type(logger.handlers[0]) is logging.StreamHandler

    def test_only_verbose_is_configurable(self):
        """Console output is the only destination; there is no file option."""
        assert list(inspect.signature(setup_logging).parameters) == ["verbose"]

    def test_messages_are_level_prefixed(self, capsys):
        """Records are written to stdout as 'LEVEL: message'."""
        logger = setup_logging()

        logging.getLogger("bin2obj.vertices").warning("Encountered NaN")

        assert capsys.readouterr().out == "WARNING: Encountered NaN\n"
        assert logger.handlers[0].formatter._fmt == "%(levelname)s: %(message)s"
