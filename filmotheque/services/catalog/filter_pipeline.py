"""
Composition des filtres structurels du catalogue.

Construit, a partir d'un FilterCriteria :
- le predicat complet (ET logique des sous-predicats presents), evalue en memoire
- la requete selective poussee vers le stockage (egalites sur colonnes, IDs)

Le predicat de base (categorie Film, enregistrements non supprimes) est
toujours applique et n'est pas configurable par l'appelant.
"""

from collections.abc import Callable, Iterable
from typing import Optional

from filmotheque.core.entities.media import MediaRecord
from filmotheque.core.ports.repositories import CatalogQuery
from filmotheque.core.value_objects import FilterCriteria, MediaType

from .attribute_matcher import matches_country, matches_director, matches_language

Predicate = Callable[[MediaRecord], bool]


def base_predicate(include_deleted: bool = False) -> Predicate:
    """Predicat fixe : films uniquement, hors suppressions logiques."""

    def _accept(record: MediaRecord) -> bool:
        if record.media_type != MediaType.FILM:
            return False
        return include_deleted or not record.is_deleted

    return _accept


def _format_value(record: MediaRecord) -> str:
    """Libelle du format d'un enregistrement (enum ou chaine brute)."""
    return getattr(record.format, "value", record.format)


def criteria_predicates(criteria: FilterCriteria) -> list[Predicate]:
    """
    Liste des sous-predicats correspondant aux criteres presents.

    Chaque predicat est independant : l'ordre d'application n'a pas
    d'influence sur le resultat.
    """
    predicates: list[Predicate] = []
    if criteria.format:
        predicates.append(lambda r: _format_value(r) == criteria.format)
    if criteria.year is not None:
        predicates.append(lambda r: r.year == criteria.year)
    if criteria.language:
        predicates.append(lambda r: matches_language(r.attributes, criteria.language))
    if criteria.country:
        predicates.append(lambda r: matches_country(r.attributes, criteria.country))
    if criteria.director:
        predicates.append(lambda r: matches_director(r.attributes, criteria.director))
    return predicates


def build_predicate(criteria: FilterCriteria) -> Predicate:
    """
    Construit le predicat d'acceptation complet d'un enregistrement.

    Args:
        criteria: Criteres de la requete

    Returns:
        Fonction record -> bool (base ET tous les criteres presents)
    """
    base = base_predicate(criteria.include_deleted)
    predicates = criteria_predicates(criteria)

    def _accept(record: MediaRecord) -> bool:
        return base(record) and all(p(record) for p in predicates)

    return _accept


def build_query(
    criteria: FilterCriteria,
    ids: Optional[Iterable[int]] = None,
) -> CatalogQuery:
    """
    Construit la requete selective a pousser vers le stockage.

    Args:
        criteria: Criteres de la requete
        ids: IDs candidats issus de la recherche plein texte (None = tous)

    Returns:
        CatalogQuery avec la restriction de base, format/annee et IDs
    """
    return CatalogQuery(
        media_type=MediaType.FILM,
        format=criteria.format,
        year=criteria.year,
        ids=frozenset(ids) if ids is not None else None,
        include_deleted=criteria.include_deleted,
    )
