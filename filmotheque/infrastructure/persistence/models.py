"""
Modeles SQLModel pour la base de donnees Filmotheque.

Ces modeles representent les tables de la base de donnees.
Ils sont distincts des entites de domaine (dataclass dans core/entities/)
selon l'architecture hexagonale.

Tables:
- media: Medias du catalogue (films et series), avec suppression logique
- search_index: Projection (id, titre, annee) pour la recherche en base

Le sac d'attributs est stocke serialise en JSON dans attributes_json.
"""

import json
from datetime import datetime, timezone
from typing import Any

from sqlmodel import Field, SQLModel


def utcnow() -> datetime:
    """Horodatage UTC courant."""
    return datetime.now(timezone.utc)


class MediaModel(SQLModel, table=True):
    """
    Modele representant un media du catalogue.

    orderable_title est derive du titre par le repository a chaque
    sauvegarde. deleted_at marque une suppression logique.
    """

    __tablename__ = "media"

    id: int | None = Field(default=None, primary_key=True)
    title: str
    orderable_title: str = Field(default="", index=True)
    type: str = Field(default="Film", index=True)  # Film, TV
    format: str  # DVD, Blu-ray, VHS, 4K UHD
    year: int = Field(index=True)
    attributes_json: str | None = None  # JSON: {"genres": [...], "directors": [...], ...}
    poster_path: str | None = None
    created_at: datetime | None = Field(default_factory=utcnow)
    updated_at: datetime | None = Field(default_factory=utcnow)
    deleted_at: datetime | None = Field(default=None, index=True)

    @property
    def attributes(self) -> dict[str, Any]:
        """Retourne le sac d'attributs deserialise."""
        if self.attributes_json:
            try:
                value = json.loads(self.attributes_json)
            except (json.JSONDecodeError, TypeError):
                return {}
            return value if isinstance(value, dict) else {}
        return {}

    @attributes.setter
    def attributes(self, value: dict[str, Any]) -> None:
        """Serialise le sac d'attributs en JSON."""
        self.attributes_json = json.dumps(value) if value else None


class SearchIndexModel(SQLModel, table=True):
    """
    Entree de l'index de recherche en base.

    Projection minimale d'un media, maintenue par DatabaseSearchProvider.
    """

    __tablename__ = "search_index"

    media_id: int = Field(primary_key=True)
    title: str = Field(index=True)
    year: int
