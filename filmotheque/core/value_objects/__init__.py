"""
Objets valeur immutables representant des concepts du domaine sans identite.

Les objets valeur sont definis par leurs attributs plutot que par une identite.
Ils sont immutables et peuvent etre librement partages et compares par valeur.

Exports :
- MediaType : Categorie de media (Film, TV)
- MediaFormat : Format du support physique (DVD, Blu-ray, VHS, 4K UHD)
- FilterCriteria : Criteres d'une requete sur le catalogue
- SortField, SortDirection : Parametres de tri
"""

from filmotheque.core.value_objects.media import MediaFormat, MediaType
from filmotheque.core.value_objects.filter_criteria import (
    DEFAULT_SORT_DIRECTION,
    DEFAULT_SORT_FIELD,
    PAGE_SIZE_DEFAULT,
    PAGE_SIZE_MAX,
    PAGE_SIZE_MIN,
    FilterCriteria,
    SortDirection,
    SortField,
)

__all__ = [
    "MediaType",
    "MediaFormat",
    "FilterCriteria",
    "SortField",
    "SortDirection",
    "DEFAULT_SORT_FIELD",
    "DEFAULT_SORT_DIRECTION",
    "PAGE_SIZE_MIN",
    "PAGE_SIZE_MAX",
    "PAGE_SIZE_DEFAULT",
]
