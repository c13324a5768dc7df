"""
Objet valeur des criteres de recherche du catalogue.

Un FilterCriteria est construit une seule fois par requete a partir des
parametres bruts (query string HTTP, options CLI), puis transmis tel quel
au moteur de requete. Il n'est jamais persiste ni modifie.

La validation est permissive : toute valeur invalide est remplacee par
une valeur par defaut documentee au lieu de lever une erreur.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

# Bornes inclusives de la taille de page
PAGE_SIZE_MIN = 10
PAGE_SIZE_MAX = 100
PAGE_SIZE_DEFAULT = 10


class SortField(str, Enum):
    """Champ de tri accepte par le catalogue."""

    TITLE = "title"
    YEAR = "year"


class SortDirection(str, Enum):
    """Sens du tri."""

    ASC = "asc"
    DESC = "desc"


DEFAULT_SORT_FIELD = SortField.TITLE
DEFAULT_SORT_DIRECTION = SortDirection.ASC


def _clean_text(value: Any) -> Optional[str]:
    """Retourne la chaine sans espaces de bord, ou None si vide/absente."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _parse_int(value: Any) -> Optional[int]:
    """Convertit en entier, None si la valeur n'est pas un entier valide."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except (ValueError, TypeError):
        return None


@dataclass(frozen=True)
class FilterCriteria:
    """
    Criteres d'une requete sur le catalogue.

    Attributs :
        search_term : Terme de recherche plein texte ("" = pas de recherche)
        format : Libelle exact du format (ex: "DVD")
        year : Annee de sortie exacte
        language : Code ou nom exact d'une langue (ex: "en", "English")
        country : Code ou nom exact d'un pays (ex: "US", "United States of America")
        director : Nom exact d'un realisateur (sensible a la casse)
        sort_field : Champ de tri (titre ou annee)
        sort_direction : Sens du tri
        page : Numero de page (1-indexe)
        page_size : Taille de page demandee (bornee par le Paginator)
        include_deleted : Inclut les enregistrements supprimes (soft delete)
    """

    search_term: str = ""
    format: Optional[str] = None
    year: Optional[int] = None
    language: Optional[str] = None
    country: Optional[str] = None
    director: Optional[str] = None
    sort_field: SortField = DEFAULT_SORT_FIELD
    sort_direction: SortDirection = DEFAULT_SORT_DIRECTION
    page: int = 1
    page_size: int = PAGE_SIZE_DEFAULT
    include_deleted: bool = False

    @property
    def has_search(self) -> bool:
        """Indique si un terme de recherche plein texte est present."""
        return bool(self.search_term)

    @classmethod
    def from_query_params(
        cls,
        q: Any = None,
        format: Any = None,
        year: Any = None,
        language: Any = None,
        country: Any = None,
        director: Any = None,
        sort: Any = None,
        direction: Any = None,
        page: Any = None,
        page_size: Any = None,
        include_deleted: bool = False,
        default_page_size: int = PAGE_SIZE_DEFAULT,
    ) -> "FilterCriteria":
        """
        Construit des criteres a partir de parametres bruts non valides.

        Regles de coercition :
        - chaines vides ou blanches : critere absent
        - year non entier : pas de filtre par annee
        - sort inconnu : "title" ; direction inconnue : "asc"
        - page absente, invalide ou < 1 : 1
        - page_size absente ou invalide : default_page_size (le bornage
          est fait par le Paginator)

        Args :
            q : Terme de recherche
            format, year, language, country, director : Filtres structurels
            sort : Champ de tri brut
            direction : Sens de tri brut
            page : Numero de page brut
            page_size : Taille de page brute
            include_deleted : Inclure les enregistrements supprimes
            default_page_size : Taille de page si absente ou invalide

        Retourne :
            FilterCriteria normalise
        """
        sort_value = (_clean_text(sort) or "").lower()
        try:
            sort_field = SortField(sort_value)
        except ValueError:
            sort_field = DEFAULT_SORT_FIELD

        direction_value = (_clean_text(direction) or "").lower()
        try:
            sort_direction = SortDirection(direction_value)
        except ValueError:
            sort_direction = DEFAULT_SORT_DIRECTION

        page_number = _parse_int(page)
        if page_number is None or page_number < 1:
            page_number = 1

        size = _parse_int(page_size)
        if size is None:
            size = default_page_size

        return cls(
            search_term=_clean_text(q) or "",
            format=_clean_text(format),
            year=_parse_int(year),
            language=_clean_text(language),
            country=_clean_text(country),
            director=_clean_text(director),
            sort_field=sort_field,
            sort_direction=sort_direction,
            page=page_number,
            page_size=size,
            include_deleted=include_deleted,
        )
