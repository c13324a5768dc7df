"""
Fournisseur de recherche adosse a la base de donnees.

Maintient une table search_index (id, titre, annee) et repond aux
recherches par correspondance de sous-chaine insensible a la casse sur
le titre, ou par egalite sur l'annee quand le terme est numerique.

C'est le fournisseur par defaut : il ne demande aucun service externe.
"""

from typing import Optional

from loguru import logger
from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from filmotheque.core.ports.search import (
    ISearchProvider,
    SearchIndexEntry,
    SearchUnavailableError,
)
from filmotheque.infrastructure.persistence.models import SearchIndexModel
from filmotheque.utils.helpers import fits_sql_integer


def _escape_like(term: str) -> str:
    """Echappe les jokers LIKE (% et _) avec le caractere \\."""
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def _year_term(term: str) -> Optional[int]:
    """Annee portee par un terme en chiffres ASCII, None sinon ou si hors INTEGER."""
    if not (term.isascii() and term.isdecimal()):
        return None
    year = int(term)
    return year if fits_sql_integer(year) else None


class DatabaseSearchProvider(ISearchProvider):
    """Recherche plein texte simple sur la table search_index."""

    def __init__(self, session: Session) -> None:
        self._session = session

    async def search(self, term: str) -> set[int]:
        term = term.strip()
        if not term:
            return set()

        pattern = f"%{_escape_like(term.lower())}%"
        condition = func.lower(SearchIndexModel.title).like(pattern, escape="\\")
        year = _year_term(term)
        if year is not None:
            condition = condition | (SearchIndexModel.year == year)

        statement = select(SearchIndexModel.media_id).where(condition)
        try:
            ids = self._session.exec(statement).all()
        except SQLAlchemyError as e:
            logger.error(f"Echec de la recherche en base: {e}")
            raise SearchUnavailableError(str(e)) from e
        return set(ids)

    async def index(self, entry: SearchIndexEntry) -> None:
        existing = self._session.get(SearchIndexModel, entry.id)
        if existing:
            existing.title = entry.title
            existing.year = entry.year
            self._session.add(existing)
        else:
            self._session.add(
                SearchIndexModel(media_id=entry.id, title=entry.title, year=entry.year)
            )
        self._session.commit()

    async def remove(self, media_id: int) -> None:
        existing = self._session.get(SearchIndexModel, media_id)
        if existing:
            self._session.delete(existing)
            self._session.commit()

    async def clear(self) -> None:
        for entry in self._session.exec(select(SearchIndexModel)).all():
            self._session.delete(entry)
        self._session.commit()
        logger.debug("Index de recherche en base vide")

    def count(self) -> int:
        """Nombre d'entrees dans l'index."""
        return len(self._session.exec(select(SearchIndexModel.media_id)).all())
