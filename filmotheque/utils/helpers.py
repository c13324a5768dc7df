"""
Fonctions utilitaires partagees dans le projet Filmotheque.

Ce module centralise les fonctions reutilisees a travers le codebase :
- normalize_orderable_title : cle de tri d'un titre
- clean_title : nettoyage d'un titre saisi ou importe
- attribute_list : lecture tolerante d'une liste du sac d'attributs
- fits_sql_integer : entier representable dans une colonne INTEGER
"""

import unicodedata
from typing import Any

from filmotheque.utils.constants import (
    ORDERABLE_TITLE_ARTICLE,
    SQL_INTEGER_MAX,
    SQL_INTEGER_MIN,
)


def normalize_orderable_title(title: str) -> str:
    """
    Cle de tri normalisee pour un titre.

    Met le titre en minuscules puis retire le prefixe "the " s'il est present.
    Aucun autre article n'est retire ("a", "an" sont conserves), et "Theatre"
    n'est pas touche car l'espace fait partie du prefixe.

    Ex: "The Godfather" -> "godfather", "THE MATRIX" -> "matrix"
    """
    lowered = (title or "").lower()
    if lowered.startswith(ORDERABLE_TITLE_ARTICLE):
        return lowered[len(ORDERABLE_TITLE_ARTICLE):]
    return lowered


def strip_invisible_chars(text: str) -> str:
    """
    Retire les caractères Unicode invisibles d'une chaîne.

    Supprime les caractères de contrôle et les marques directionnelles
    qui peuvent provenir d'un copier-coller (LRM, RLM, BOM, etc.).
    """
    return "".join(
        char for char in text if unicodedata.category(char) not in ("Cf", "Cc")
    )


def clean_title(title: str) -> str:
    """Nettoie un titre : retire les caractères invisibles et les espaces superflus."""
    if not title:
        return title
    return strip_invisible_chars(title).strip()


def attribute_list(attributes: Any, key: str) -> list[Any]:
    """
    Lit une liste dans le sac d'attributs sans jamais lever d'exception.

    Retourne une liste vide si le sac n'est pas un dict, si la cle est
    absente ou si la valeur n'est pas une liste.
    """
    if not isinstance(attributes, dict):
        return []
    value = attributes.get(key)
    if isinstance(value, (list, tuple)):
        return list(value)
    return []


def fits_sql_integer(value: int) -> bool:
    """Vrai si l'entier tient dans un INTEGER SQLite (64 bits signe)."""
    return SQL_INTEGER_MIN <= value <= SQL_INTEGER_MAX
