"""
Pagination des resultats du catalogue.

La taille de page est bornee dans un intervalle inclusif, la page est
au minimum 1. Le decoupage se fait sur la sequence deja triee.
"""

import math
from collections.abc import Sequence

from filmotheque.core.entities.media import MediaRecord
from filmotheque.core.value_objects import PAGE_SIZE_MAX, PAGE_SIZE_MIN

from .dataclasses import CatalogPage


def clamp_page_size(
    page_size: int,
    minimum: int = PAGE_SIZE_MIN,
    maximum: int = PAGE_SIZE_MAX,
) -> int:
    """Borne la taille de page dans [minimum, maximum]."""
    return max(minimum, min(maximum, page_size))


def paginate(
    records: Sequence[MediaRecord],
    page: int = 1,
    page_size: int = PAGE_SIZE_MIN,
    minimum: int = PAGE_SIZE_MIN,
    maximum: int = PAGE_SIZE_MAX,
) -> CatalogPage:
    """
    Decoupe une sequence triee en page.

    Args:
        records: Sequence complete, deja filtree et triee
        page: Numero de page demande (< 1 traite comme 1)
        page_size: Taille demandee (bornee dans [minimum, maximum])
        minimum: Borne basse de la taille de page
        maximum: Borne haute de la taille de page

    Returns:
        CatalogPage avec la tranche demandee et le total non pagine.
        Une page au-dela de la derniere est vide mais conserve le total.
    """
    size = clamp_page_size(page_size, minimum, maximum)
    current = max(1, page)
    total = len(records)
    start = (current - 1) * size
    return CatalogPage(
        items=list(records[start:start + size]),
        total=total,
        page=current,
        page_size=size,
        last_page=max(1, math.ceil(total / size)),
    )
