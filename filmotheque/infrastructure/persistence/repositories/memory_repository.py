"""
Implementation en memoire du repository des medias.

Stockage sans base de donnees, utile pour les tests et les catalogues
charges depuis un fichier. Ignore volontairement la restriction par
format/annee de CatalogQuery : le moteur de requete reapplique toujours
le predicat complet, ce qui garantit des resultats identiques au
repository SQLModel.
"""

from dataclasses import replace
from datetime import datetime, timezone
from typing import Iterable, Optional

from filmotheque.core.entities.media import MediaRecord
from filmotheque.core.ports.repositories import CatalogQuery, IMediaRepository
from filmotheque.utils.helpers import normalize_orderable_title


class InMemoryMediaRepository(IMediaRepository):
    """Repository en memoire, indexe par ID."""

    def __init__(self, records: Optional[Iterable[MediaRecord]] = None) -> None:
        self._records: dict[int, MediaRecord] = {}
        self._next_id = 1
        for record in records or ():
            self.save(record)

    def find_films(self, query: CatalogQuery) -> list[MediaRecord]:
        """Retourne les medias de la categorie demandee (copies)."""
        results = []
        for record in self._records.values():
            if record.media_type != query.media_type:
                continue
            if record.is_deleted and not query.include_deleted:
                continue
            if query.ids is not None and record.id not in query.ids:
                continue
            results.append(replace(record))
        return results

    def get_by_id(self, media_id: int, include_deleted: bool = False) -> Optional[MediaRecord]:
        record = self._records.get(media_id)
        if record is None or (record.is_deleted and not include_deleted):
            return None
        return replace(record)

    def save(self, record: MediaRecord) -> MediaRecord:
        """Sauvegarde une copie de l'enregistrement, avec orderable_title recalcule."""
        now = datetime.now(timezone.utc)
        stored = replace(
            record,
            attributes=dict(record.attributes or {}),
            orderable_title=normalize_orderable_title(record.title),
            updated_at=now,
        )
        if stored.id is None:
            stored.id = self._next_id
        if stored.created_at is None:
            stored.created_at = now
        self._next_id = max(self._next_id, stored.id + 1)
        self._records[stored.id] = stored
        return replace(stored)

    def soft_delete(self, media_id: int) -> bool:
        record = self._records.get(media_id)
        if record is None or record.is_deleted:
            return False
        record.deleted_at = datetime.now(timezone.utc)
        return True

    def list_all(self, include_deleted: bool = False) -> list[MediaRecord]:
        return [
            replace(record)
            for _, record in sorted(self._records.items())
            if include_deleted or not record.is_deleted
        ]
