"""
Tests unitaires pour la configuration (pydantic-settings).
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from filmotheque.config import Settings


class TestSettings:
    """Tests pour Settings."""

    def test_defaults(self) -> None:
        settings = Settings(_env_file=None)
        assert settings.database_url == "sqlite:///filmotheque.db"
        assert settings.search_driver == "database"
        assert settings.meilisearch_enabled is False
        assert (settings.page_size_min, settings.page_size_default, settings.page_size_max) == (10, 10, 100)

    def test_env_prefix(self, monkeypatch) -> None:
        monkeypatch.setenv("FILMOTHEQUE_SEARCH_DRIVER", "meilisearch")
        monkeypatch.setenv("FILMOTHEQUE_PAGE_SIZE_DEFAULT", "25")
        settings = Settings(_env_file=None)
        assert settings.meilisearch_enabled is True
        assert settings.page_size_default == 25

    def test_unknown_search_driver_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Settings(_env_file=None, search_driver="elastic")

    def test_inconsistent_page_sizes_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Settings(_env_file=None, page_size_min=20, page_size_default=10)

    def test_log_file_expands_home(self) -> None:
        settings = Settings(_env_file=None, log_file="~/filmotheque.log")
        assert settings.log_file == Path.home() / "filmotheque.log"
