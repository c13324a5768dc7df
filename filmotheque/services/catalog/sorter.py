"""
Tri deterministe des resultats du catalogue.

Le tri par titre utilise la cle orderable_title (jamais le titre brut),
le tri par annee est numerique. Les egalites sont departagees par ID
croissant quel que soit le sens, pour que deux requetes identiques
produisent exactement le meme ordre (stabilite de la pagination).
"""

from collections.abc import Iterable

from filmotheque.core.entities.media import MediaRecord
from filmotheque.core.value_objects import SortDirection, SortField
from filmotheque.utils.helpers import normalize_orderable_title


def _id_key(record: MediaRecord) -> tuple[bool, int]:
    """Cle secondaire : ID croissant, enregistrements sans ID en dernier."""
    return (record.id is None, record.id or 0)


def _title_key(record: MediaRecord) -> str:
    """Cle de tri titre, recalculee si le stockage ne l'a pas renseignee."""
    return record.orderable_title or normalize_orderable_title(record.title)


def _year_key(record: MediaRecord) -> int:
    return record.year or 0


def order_records(
    records: Iterable[MediaRecord],
    field: SortField = SortField.TITLE,
    direction: SortDirection = SortDirection.ASC,
) -> list[MediaRecord]:
    """
    Ordonne les enregistrements selon le champ et le sens demandes.

    Args:
        records: Enregistrements filtres (ordre d'entree quelconque)
        field: Champ de tri
        direction: Sens du tri

    Returns:
        Nouvelle liste triee
    """
    primary_key = _year_key if field == SortField.YEAR else _title_key
    # Tri stable en deux passes : d'abord l'ID (toujours croissant),
    # puis la cle primaire. reverse=True preserve l'ordre des egalites.
    ordered = sorted(records, key=_id_key)
    ordered.sort(key=primary_key, reverse=(direction == SortDirection.DESC))
    return ordered
