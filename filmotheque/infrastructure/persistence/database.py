"""
Configuration de la base de donnees SQLite pour Filmotheque.

Ce module fournit :
- Engine SQLite avec configuration optimisee pour multi-thread
- Session factory avec context manager
- Fonction d'initialisation des tables et migrations legeres

La base de donnees est configuree via FILMOTHEQUE_DATABASE_URL (defaut: sqlite:///filmotheque.db).
"""

from collections.abc import Generator
from pathlib import Path
from typing import Optional

from sqlalchemy import Engine, text
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from filmotheque.utils.helpers import normalize_orderable_title

# Engine global - initialise lors du premier appel a get_engine()
_engine: Optional[Engine] = None


def create_db_engine(db_url: str) -> Engine:
    """
    Cree un engine SQLModel pour l'URL donnee.

    Les bases SQLite en memoire utilisent un StaticPool pour que toutes
    les sessions partagent la meme connexion (et donc les memes tables).
    """
    if db_url in ("sqlite://", "sqlite:///:memory:"):
        return create_engine(
            db_url,
            echo=False,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

    # Creer le repertoire parent si l'URL est un fichier SQLite
    if db_url.startswith("sqlite:///"):
        db_path = Path(db_url.replace("sqlite:///", ""))
        db_path.parent.mkdir(exist_ok=True, parents=True)

    connect_args = {"check_same_thread": False} if db_url.startswith("sqlite") else {}
    return create_engine(db_url, echo=False, connect_args=connect_args)


def get_engine() -> Engine:
    """
    Retourne l'engine global, en le creant si necessaire.

    Utilise la configuration de l'application pour l'URL de la BDD.
    """
    global _engine
    if _engine is None:
        from filmotheque.config import Settings

        _engine = create_db_engine(Settings().database_url)
    return _engine


def get_session() -> Generator[Session, None, None]:
    """
    Generateur de session SQLModel.

    Utilisation avec next() ou dans une boucle for :
        session = next(get_session())

    Ou avec context manager :
        with Session(get_engine()) as session:
            # operations

    Yields:
        Session SQLModel connectee a l'engine
    """
    with Session(get_engine()) as session:
        yield session


def init_db(engine: Optional[Engine] = None) -> None:
    """
    Initialise la base de donnees en creant toutes les tables.

    Importe les modeles pour enregistrer leurs metadonnees dans
    SQLModel.metadata, cree les tables manquantes puis applique
    les migrations de schema.

    Args:
        engine: Engine cible (defaut: engine global)
    """
    # Import des modeles pour enregistrer leurs metadonnees
    # L'import est fait ici pour eviter les imports circulaires
    from filmotheque.infrastructure.persistence import models  # noqa: F401

    engine = engine or get_engine()
    SQLModel.metadata.create_all(engine)
    run_migrations(engine)


def run_migrations(engine: Engine) -> None:
    """
    Execute les migrations de schema necessaires (SQLite uniquement).

    SQLModel.metadata.create_all() ne modifie pas les tables existantes :
    les colonnes ajoutees apres coup sont creees ici.
    """
    if engine.dialect.name != "sqlite":
        return

    with engine.connect() as conn:
        result = conn.execute(text("PRAGMA table_info(media)"))
        columns = [row[1] for row in result.fetchall()]

        # Migration 1: cle de tri des titres, avec remplissage des lignes existantes
        if "orderable_title" not in columns:
            conn.execute(
                text("ALTER TABLE media ADD COLUMN orderable_title VARCHAR NOT NULL DEFAULT ''")
            )
            conn.execute(
                text("CREATE INDEX IF NOT EXISTS ix_media_orderable_title ON media (orderable_title)")
            )
            rows = conn.execute(text("SELECT id, title FROM media ORDER BY id")).fetchall()
            for media_id, title in rows:
                conn.execute(
                    text("UPDATE media SET orderable_title = :value WHERE id = :id"),
                    {"value": normalize_orderable_title(title or ""), "id": media_id},
                )
            conn.commit()

        # Migration 2: chemin de l'affiche
        if "poster_path" not in columns:
            conn.execute(text("ALTER TABLE media ADD COLUMN poster_path VARCHAR"))
            conn.commit()
