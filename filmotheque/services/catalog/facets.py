"""
Facettes du catalogue (valeurs suggerees pour les filtres).

Les facettes sont calculees sur le catalogue entier, independamment
des criteres de la requete courante.
"""

from collections.abc import Iterable

from filmotheque.core.entities.media import MediaRecord
from filmotheque.utils.constants import ATTR_DIRECTORS
from filmotheque.utils.helpers import attribute_list


def distinct_directors(records: Iterable[MediaRecord]) -> list[str]:
    """
    Liste triee et dedoublonnee des realisateurs presents dans les films.

    Les noms sont debarrasses des espaces de bord, les chaines vides et
    les valeurs non textuelles sont ignorees.
    """
    names: set[str] = set()
    for record in records:
        for director in attribute_list(record.attributes, ATTR_DIRECTORS):
            if not isinstance(director, str):
                continue
            name = director.strip()
            if name:
                names.add(name)
    return sorted(names)
