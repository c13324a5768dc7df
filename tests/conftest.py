"""
Fixtures pytest partagees pour les tests Filmotheque.

Ce module contient les fixtures communes utilisees dans les tests:
- Base SQLite en memoire (engine + session) avec tables creees
- Settings de test avec chemins temporaires
- Catalogue d'exemple (construit avec tests/fixtures/films.py)
- Mock du fournisseur de recherche (ISearchProvider)
"""

from pathlib import Path
from typing import Iterator
from unittest.mock import AsyncMock

import pytest
from sqlalchemy import Engine
from sqlmodel import Session

from filmotheque.config import Settings
from filmotheque.core.entities.media import MediaRecord
from filmotheque.core.ports.search import ISearchProvider
from filmotheque.core.value_objects import MediaFormat
from filmotheque.infrastructure.persistence.database import create_db_engine, init_db
from filmotheque.infrastructure.persistence.repositories import InMemoryMediaRepository
from tests.fixtures.films import make_film


@pytest.fixture
def engine() -> Iterator[Engine]:
    """Engine SQLite en memoire partage (StaticPool), tables creees."""
    db_engine = create_db_engine("sqlite://")
    init_db(db_engine)
    yield db_engine
    db_engine.dispose()


@pytest.fixture
def session(engine: Engine) -> Iterator[Session]:
    """Session SQLModel sur la base en memoire."""
    with Session(engine) as db_session:
        yield db_session


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec base en memoire et logs dans tmp_path.

    _env_file=None ignore un eventuel .env local.
    """
    return Settings(
        _env_file=None,
        database_url="sqlite://",
        log_file=tmp_path / "logs" / "test.log",
    )


@pytest.fixture
def mock_search_provider() -> AsyncMock:
    """
    Mock de ISearchProvider pour les tests.

    search() retourne un ensemble vide par defaut : configurer
    return_value ou side_effect dans chaque test.
    """
    provider = AsyncMock(spec=ISearchProvider)
    provider.search.return_value = set()
    return provider


@pytest.fixture
def godfather_catalog() -> list[MediaRecord]:
    """
    Petit catalogue d'exemple.

    Tri par titre attendu : The Godfather (1), The Matrix (2), Matrix Revolutions (3).
    """
    return [
        make_film(
            id=1,
            title="The Godfather",
            year=1972,
            format=MediaFormat.DVD,
            directors=["Francis Ford Coppola"],
            genres=["Crime", "Drama"],
            languages=[{"code": "en", "name": "English"}, {"code": "it", "name": "Italiano"}],
            countries=[{"code": "US", "name": "United States of America"}],
        ),
        make_film(
            id=2,
            title="The Matrix",
            year=1999,
            format=MediaFormat.BLU_RAY,
            directors=["Lana Wachowski", "Lilly Wachowski"],
            genres=["Action", "Science Fiction"],
            languages=[{"code": "en", "name": "English"}],
            countries=[{"code": "US", "name": "United States of America"}],
        ),
        make_film(
            id=3,
            title="Matrix Revolutions",
            year=2003,
            format=MediaFormat.DVD,
            directors=["Lana Wachowski", "Lilly Wachowski"],
            genres=["Action"],
            languages=[{"code": "en", "name": "English"}],
            countries=[{"code": "AU", "name": "Australia"}],
        ),
    ]


@pytest.fixture
def memory_repo(godfather_catalog: list[MediaRecord]) -> InMemoryMediaRepository:
    """Repository en memoire pre-rempli avec le catalogue d'exemple."""
    return InMemoryMediaRepository(godfather_catalog)
