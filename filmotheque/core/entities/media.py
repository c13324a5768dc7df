"""
Entite du catalogue.

Un MediaRecord represente un support physique (DVD, Blu-ray, VHS...) du
catalogue. Les metadonnees descriptives (genres, realisateurs, langues,
pays...) vivent dans un sac d'attributs semi-structure plutot que dans
des colonnes fixes.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

from filmotheque.core.value_objects import MediaFormat, MediaType


@dataclass
class MediaRecord:
    """
    Entree du catalogue.

    Attributs :
        id : ID attribue par le stockage a la creation (immuable ensuite)
        title : Titre affiche
        orderable_title : Cle de tri derivee du titre, recalculee par le stockage
                          a chaque ecriture (jamais fournie par l'appelant)
        media_type : Categorie (Film ou TV)
        format : Format du support physique
        year : Annee de sortie
        attributes : Sac d'attributs semi-structure. Cles optionnelles :
                     genres, directors, description, tagline, countries,
                     languages, run_time. Une cle absente signifie "inconnu".
        poster_path : Chemin relatif de l'affiche (gere hors du catalogue)
        deleted_at : Date de suppression logique (None si actif)
        created_at : Date de creation
        updated_at : Date de derniere modification
    """

    id: Optional[int] = None
    title: str = ""
    orderable_title: str = ""
    media_type: MediaType = MediaType.FILM
    format: MediaFormat = MediaFormat.DVD
    year: int = 0
    attributes: dict[str, Any] = field(default_factory=dict)
    poster_path: Optional[str] = None
    deleted_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def is_deleted(self) -> bool:
        """Indique si l'enregistrement a ete supprime logiquement."""
        return self.deleted_at is not None

    @property
    def is_film(self) -> bool:
        """Indique si l'enregistrement est un film."""
        return self.media_type == MediaType.FILM
