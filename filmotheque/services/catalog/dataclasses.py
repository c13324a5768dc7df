"""
Dataclasses du moteur de requete du catalogue.

Definit les structures de resultat retournees par CatalogQueryService.
"""

from dataclasses import dataclass, field

from filmotheque.core.entities.media import MediaRecord
from filmotheque.core.value_objects import FilterCriteria


@dataclass
class CatalogPage:
    """
    Page de resultats.

    Attributs :
        items : Enregistrements de la page, dans l'ordre de tri
        total : Nombre total d'enregistrements (avant pagination)
        page : Numero de page effectif
        page_size : Taille de page effective (apres bornage)
        last_page : Numero de la derniere page (1 minimum)
    """

    items: list[MediaRecord] = field(default_factory=list)
    total: int = 0
    page: int = 1
    page_size: int = 10
    last_page: int = 1

    @property
    def is_empty(self) -> bool:
        return not self.items


@dataclass
class CatalogResult:
    """
    Reponse complete d'une requete sur le catalogue.

    Attributs :
        criteria : Criteres effectivement appliques (apres coercition)
        page : Page de resultats
        directors : Liste des realisateurs du catalogue entier (suggestions)
    """

    criteria: FilterCriteria
    page: CatalogPage
    directors: list[str] = field(default_factory=list)
