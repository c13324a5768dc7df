"""
Tests unitaires pour la configuration loguru.
"""

import pytest
from loguru import logger

from filmotheque.logging_config import configure_logging, console_level


class TestConsoleLevel:
    """Tests pour console_level."""

    def test_default_level_is_kept(self) -> None:
        assert console_level("warning") == "WARNING"

    @pytest.mark.parametrize("verbose,expected", [(1, "INFO"), (2, "DEBUG"), (5, "DEBUG")])
    def test_verbose_counts(self, verbose: int, expected: str) -> None:
        assert console_level("WARNING", verbose=verbose) == expected

    def test_quiet_wins_over_verbose(self) -> None:
        assert console_level("DEBUG", verbose=2, quiet=True) == "ERROR"


class TestConfigureLogging:
    """Tests pour configure_logging."""

    def test_creates_log_directory_and_writes_json(self, test_settings) -> None:
        configure_logging(test_settings)
        logger.info("Film ajoute")
        logger.complete()
        logger.remove()

        content = test_settings.log_file.read_text()
        assert '"message": "Film ajoute"' in content
