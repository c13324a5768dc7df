"""
Service de cycle de vie des films du catalogue.

Chemin d'ecriture : creation, mise a jour, suppression logique et
reindexation. Le stockage recalcule orderable_title a chaque sauvegarde ;
ce service maintient en plus l'index de recherche a jour apres chaque
ecriture durable.
"""

from dataclasses import dataclass
from typing import Any, Optional

from loguru import logger

from filmotheque.core.entities.media import MediaRecord
from filmotheque.core.ports.repositories import IMediaRepository, MediaNotFoundError
from filmotheque.core.ports.search import ISearchProvider, SearchIndexEntry
from filmotheque.core.value_objects import MediaFormat, MediaType
from filmotheque.utils.helpers import clean_title


@dataclass
class ReindexStats:
    """Statistiques d'une reindexation complete."""

    total: int = 0
    indexed: int = 0
    skipped: int = 0


def _index_entry(record: MediaRecord) -> SearchIndexEntry:
    """Projection d'un enregistrement sauvegarde vers l'index."""
    return SearchIndexEntry(id=record.id, title=record.title, year=record.year)


class MediaService:
    """
    Service pour creer, modifier et supprimer les films du catalogue.

    La categorie est toujours forcee a Film, quelle que soit l'entree.
    """

    def __init__(
        self,
        media_repo: IMediaRepository,
        search_provider: ISearchProvider,
    ) -> None:
        """
        Initialise le service.

        Args:
            media_repo: Stockage des medias
            search_provider: Fournisseur de recherche a maintenir
        """
        self._media_repo = media_repo
        self._search_provider = search_provider

    def get_film(self, media_id: int) -> MediaRecord:
        """
        Recupere un film actif par son ID.

        Raises:
            MediaNotFoundError: Si le film n'existe pas, est supprime ou n'est pas un film
        """
        record = self._media_repo.get_by_id(media_id)
        if record is None or not record.is_film:
            raise MediaNotFoundError(media_id)
        return record

    async def create_film(
        self,
        title: str,
        format: MediaFormat,
        year: int,
        attributes: Optional[dict[str, Any]] = None,
        poster_path: Optional[str] = None,
    ) -> MediaRecord:
        """
        Cree un film et l'ajoute a l'index de recherche.

        Returns:
            Le film sauvegarde (avec id et orderable_title)
        """
        record = MediaRecord(
            title=clean_title(title),
            media_type=MediaType.FILM,
            format=MediaFormat(format),
            year=year,
            attributes=dict(attributes or {}),
            poster_path=poster_path,
        )
        saved = self._media_repo.save(record)
        await self._search_provider.index(_index_entry(saved))
        logger.bind(media_id=saved.id).info(f"Film cree: {saved.title} ({saved.year})")
        return saved

    async def update_film(
        self,
        media_id: int,
        title: str,
        format: MediaFormat,
        year: int,
        attributes: Optional[dict[str, Any]] = None,
        poster_path: Optional[str] = None,
    ) -> MediaRecord:
        """
        Remplace les donnees d'un film et met a jour son entree d'index.

        Le poster existant est conserve si poster_path n'est pas fourni.

        Raises:
            MediaNotFoundError: Si le film n'existe pas ou est supprime
        """
        record = self.get_film(media_id)
        record.title = clean_title(title)
        record.media_type = MediaType.FILM
        record.format = MediaFormat(format)
        record.year = year
        record.attributes = dict(attributes or {})
        if poster_path is not None:
            record.poster_path = poster_path

        saved = self._media_repo.save(record)
        await self._search_provider.index(_index_entry(saved))
        logger.bind(media_id=saved.id).info(f"Film mis a jour: {saved.title} ({saved.year})")
        return saved

    async def delete_film(self, media_id: int) -> None:
        """
        Supprime logiquement un film et retire son entree d'index.

        Raises:
            MediaNotFoundError: Si le film n'existe pas ou est deja supprime
        """
        self.get_film(media_id)
        self._media_repo.soft_delete(media_id)
        await self._search_provider.remove(media_id)
        logger.info("Film supprime", media_id=media_id)

    async def reindex(self) -> ReindexStats:
        """
        Reconstruit l'index de recherche et les cles de tri.

        Chaque enregistrement actif est resauvegarde (ce qui recalcule
        orderable_title) puis reindexe. Les enregistrements supprimes
        ne sont pas indexes.
        """
        stats = ReindexStats()
        await self._search_provider.clear()

        for record in self._media_repo.list_all(include_deleted=True):
            stats.total += 1
            saved = self._media_repo.save(record)
            if saved.is_deleted:
                stats.skipped += 1
                continue
            await self._search_provider.index(_index_entry(saved))
            stats.indexed += 1

        logger.info(
            f"Reindexation terminee: {stats.indexed}/{stats.total}",
            skipped=stats.skipped,
        )
        return stats
