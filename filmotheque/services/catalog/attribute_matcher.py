"""
Correspondances dans le sac d'attributs d'un media.

Evalue l'appartenance d'une valeur aux listes semi-structurees du sac
(realisateurs, langues, pays) sur la structure materialisee en memoire.
Aucun dialecte JSON de base de donnees n'est suppose : tout stockage
capable de restituer le sac convient.

Les donnees absentes ou malformees ne levent jamais d'exception, elles
ne correspondent simplement pas.
"""

from typing import Any

from filmotheque.utils.constants import ATTR_COUNTRIES, ATTR_DIRECTORS, ATTR_LANGUAGES
from filmotheque.utils.helpers import attribute_list


def _matches_code_or_name(entries: list[Any], term: str) -> bool:
    """Vrai si un element {code, name} a code == term ou name == term."""
    for entry in entries:
        if not isinstance(entry, dict):
            continue
        if entry.get("code") == term or entry.get("name") == term:
            return True
    return False


def matches_director(attributes: Any, name: str) -> bool:
    """
    Vrai si la liste des realisateurs contient exactement `name`.

    La comparaison est sensible a la casse et sans normalisation.
    """
    return name in (d for d in attribute_list(attributes, ATTR_DIRECTORS) if isinstance(d, str))


def matches_language(attributes: Any, term: str) -> bool:
    """Vrai si une langue du media a pour code ou pour nom exactement `term`."""
    return _matches_code_or_name(attribute_list(attributes, ATTR_LANGUAGES), term)


def matches_country(attributes: Any, term: str) -> bool:
    """Vrai si un pays du media a pour code ou pour nom exactement `term`."""
    return _matches_code_or_name(attribute_list(attributes, ATTR_COUNTRIES), term)
