"""
Objets valeur pour la classification des medias du catalogue.

Enumerations fermees du type de media (film, serie) et du format
du support physique.
"""

from enum import Enum


class MediaType(str, Enum):
    """Categorie d'un media du catalogue.

    Valeurs:
        FILM: Long-metrage, seule categorie exposee par le moteur de requete
        TV: Serie TV
    """

    FILM = "Film"
    TV = "TV"


class MediaFormat(str, Enum):
    """Format du support physique.

    Les valeurs sont les libelles stockes en base et affiches a l'utilisateur.
    """

    DVD = "DVD"
    BLU_RAY = "Blu-ray"
    VHS = "VHS"
    UHD_4K = "4K UHD"

    @classmethod
    def values(cls) -> list[str]:
        """Retourne les libelles de tous les formats, dans l'ordre de declaration."""
        return [member.value for member in cls]
