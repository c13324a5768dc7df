"""
Implementations des repositories du catalogue.

Ce module contient les implementations concretes de l'interface
IMediaRepository definie dans filmotheque/core/ports/repositories.py :

- SQLModelMediaRepository : persistance SQLite via SQLModel
- InMemoryMediaRepository : stockage en memoire (tests, imports)

Chaque repository recalcule orderable_title a partir du titre a chaque
sauvegarde et convertit entre entites de domaine et stockage.
"""

from filmotheque.infrastructure.persistence.repositories.media_repository import (
    SQLModelMediaRepository,
)
from filmotheque.infrastructure.persistence.repositories.memory_repository import (
    InMemoryMediaRepository,
)

__all__ = [
    "SQLModelMediaRepository",
    "InMemoryMediaRepository",
]
