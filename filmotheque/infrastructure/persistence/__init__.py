"""
Module de persistance SQLite pour Filmotheque.

Ce module fournit l'infrastructure de stockage utilisant SQLModel (SQLAlchemy).
Il contient :

- database.py : Configuration de l'engine, session factory, initialisation
- models.py : Modeles SQLModel representant les tables de la base de donnees
- repositories/ : Implementations du port IMediaRepository

Les modeles ici sont des adapters de persistance, distincts des entites de domaine
(dataclass dans core/entities/). La conversion entre les deux se fait dans les
repositories.

Usage:
    from filmotheque.infrastructure.persistence import init_db, get_session

    init_db()  # Cree les tables si necessaire
    session = next(get_session())
"""

from filmotheque.infrastructure.persistence.database import (
    create_db_engine,
    get_engine,
    get_session,
    init_db,
)
from filmotheque.infrastructure.persistence.models import MediaModel, SearchIndexModel

__all__ = [
    "create_db_engine",
    "get_engine",
    "get_session",
    "init_db",
    "MediaModel",
    "SearchIndexModel",
]
