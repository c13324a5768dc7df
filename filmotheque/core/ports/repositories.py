"""
Interfaces ports pour le stockage du catalogue.

Interfaces abstraites (ports) définissant les contrats pour la persistance des médias.
Les implémentations (adaptateurs) fournissent les mécanismes de stockage concrets
(SQLite via SQLModel, en mémoire pour les tests, etc.).
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from filmotheque.core.entities.media import MediaRecord
from filmotheque.core.value_objects import MediaType


class MediaNotFoundError(Exception):
    """
    Exception levée quand un média demandé n'existe pas (ou est supprimé).

    Attributs :
        media_id : ID du média introuvable
    """

    def __init__(self, media_id: int) -> None:
        self.media_id = media_id
        super().__init__(f"Media {media_id} introuvable")


@dataclass(frozen=True)
class CatalogQuery:
    """
    Requête sélective transmise au stockage.

    Contient uniquement les contraintes que tout stockage sait appliquer
    efficacement (égalités sur colonnes, liste d'IDs). Les correspondances
    dans le sac d'attributs (langue, pays, réalisateur) ne sont pas poussées
    vers le stockage : elles sont évaluées par le moteur de requête.

    Attributs :
        media_type : Catégorie imposée (toujours Film pour le catalogue)
        format : Égalité sur le format (None = pas de contrainte)
        year : Égalité sur l'année (None = pas de contrainte)
        ids : Restreint aux IDs donnés (None = pas de contrainte)
        include_deleted : Inclut les enregistrements supprimés logiquement
    """

    media_type: MediaType = MediaType.FILM
    format: Optional[str] = None
    year: Optional[int] = None
    ids: Optional[frozenset[int]] = None
    include_deleted: bool = False


class IMediaRepository(ABC):
    """
    Interface de stockage des médias du catalogue.

    Le moteur de requête n'utilise que find_films() en lecture.
    Les autres opérations constituent le chemin d'écriture utilisé par
    le service de cycle de vie.
    """

    @abstractmethod
    def find_films(self, query: CatalogQuery) -> list[MediaRecord]:
        """
        Retourne les médias satisfaisant la requête sélective.

        L'ordre n'est pas significatif : le tri est fait par le moteur.
        Un stockage peut ignorer format/year (le moteur réapplique toujours
        le prédicat complet), mais doit respecter media_type, ids et
        include_deleted.
        """
        ...

    @abstractmethod
    def get_by_id(self, media_id: int, include_deleted: bool = False) -> Optional[MediaRecord]:
        """Récupère un média par son ID."""
        ...

    @abstractmethod
    def save(self, record: MediaRecord) -> MediaRecord:
        """
        Sauvegarde un média (insertion ou mise à jour).

        L'implémentation doit recalculer orderable_title à partir du titre
        avant que l'écriture soit durable.
        """
        ...

    @abstractmethod
    def soft_delete(self, media_id: int) -> bool:
        """Supprime logiquement un média. Retourne True si supprimé."""
        ...

    @abstractmethod
    def list_all(self, include_deleted: bool = False) -> list[MediaRecord]:
        """Liste tous les médias, toutes catégories confondues."""
        ...
