"""
Utilitaires partages pour les commandes CLI de Filmotheque.

Ce module fournit :
- suppress_loguru : context manager pour desactiver/reactiver les logs loguru
- with_container : decorateur injectant un container initialise
- console : instance Rich Console partagee
- parse_code_name : lecture d'une entree "code:nom" (langues, pays)
"""

from contextlib import contextmanager
from functools import wraps
from typing import Optional

from loguru import logger as loguru_logger
from rich.console import Console

from filmotheque.container import Container

# Console globale pour tous les affichages
console = Console()


@contextmanager
def suppress_loguru():
    """
    Context manager pour desactiver les logs loguru pendant l'affichage Rich.

    Usage:
        with suppress_loguru():
            console.print(...)
    """
    loguru_logger.disable("filmotheque")
    try:
        yield
    finally:
        loguru_logger.enable("filmotheque")


def with_container(requires_db: bool = True):
    """
    Decorateur qui injecte un container initialise en premier argument.

    Args:
        requires_db: Si True (defaut), initialise la base de donnees.

    Usage:
        @with_container()
        async def my_command(container, ...):
            config = container.config()
    """
    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            container = Container()
            if requires_db:
                container.database.init()
            return await func(container, *args, **kwargs)
        return wrapper
    return decorator


def parse_code_name(value: str) -> Optional[dict[str, str]]:
    """
    Convertit "en:English" en {"code": "en", "name": "English"}.

    Sans ":", la valeur est prise comme code et comme nom.
    Retourne None pour une entree vide.

    Args:
        value: Entree saisie sur la ligne de commande

    Returns:
        Dict {code, name} ou None
    """
    value = value.strip()
    if not value:
        return None
    code, sep, name = value.partition(":")
    code = code.strip()
    name = name.strip() if sep else code
    if not code:
        return None
    return {"code": code, "name": name or code}
