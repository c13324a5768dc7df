"""
Implementation SQLModel du repository des medias.

Implemente l'interface IMediaRepository pour la persistance des medias
dans la base de donnees via SQLModel.

Le titre de tri (orderable_title) est recalcule explicitement dans save(),
avant le commit : c'est l'unique point d'ecriture de cette colonne.
"""

from typing import Optional

from sqlmodel import Session, col, select

from filmotheque.core.entities.media import MediaRecord
from filmotheque.core.ports.repositories import CatalogQuery, IMediaRepository
from filmotheque.core.value_objects import MediaFormat, MediaType
from filmotheque.infrastructure.persistence.models import MediaModel, utcnow
from filmotheque.utils.helpers import fits_sql_integer, normalize_orderable_title

# Nombre max d'IDs par clause IN (limite de variables SQLite)
_IDS_CHUNK_SIZE = 500


class SQLModelMediaRepository(IMediaRepository):
    """
    Repository SQLModel pour les medias du catalogue.

    Implemente IMediaRepository avec conversion bidirectionnelle
    entre l'entite MediaRecord (domaine) et MediaModel (persistance).
    """

    def __init__(self, session: Session) -> None:
        """
        Initialise le repository avec une session SQLModel.

        Args :
            session : Session SQLModel active pour les operations DB
        """
        self._session = session

    def _to_entity(self, model: MediaModel) -> MediaRecord:
        """
        Convertit un modele DB en entite domaine.

        Args :
            model : Le modele MediaModel depuis la DB

        Retourne :
            L'entite MediaRecord correspondante
        """
        return MediaRecord(
            id=model.id,
            title=model.title,
            orderable_title=model.orderable_title,
            media_type=MediaType(model.type),
            format=MediaFormat(model.format),
            year=model.year,
            attributes=model.attributes,
            poster_path=model.poster_path,
            deleted_at=model.deleted_at,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _apply(self, model: MediaModel, entity: MediaRecord) -> MediaModel:
        """Copie les champs modifiables de l'entite vers le modele."""
        model.title = entity.title
        model.orderable_title = normalize_orderable_title(entity.title)
        model.type = MediaType(entity.media_type).value
        model.format = MediaFormat(entity.format).value
        model.year = entity.year
        model.attributes = entity.attributes
        model.poster_path = entity.poster_path
        model.deleted_at = entity.deleted_at
        return model

    def find_films(self, query: CatalogQuery) -> list[MediaRecord]:
        """Retourne les medias satisfaisant la requete selective."""
        statement = select(MediaModel).where(MediaModel.type == query.media_type.value)
        if not query.include_deleted:
            statement = statement.where(col(MediaModel.deleted_at).is_(None))
        if query.format:
            statement = statement.where(MediaModel.format == query.format)
        # Une annee hors des entiers SQL ne filtre pas ici, le predicat
        # en memoire la rejette ensuite
        if query.year is not None and fits_sql_integer(query.year):
            statement = statement.where(MediaModel.year == query.year)

        if query.ids is None:
            models = self._session.exec(statement).all()
            return [self._to_entity(model) for model in models]

        ids = sorted(i for i in query.ids if fits_sql_integer(i))
        records: list[MediaRecord] = []
        for start in range(0, len(ids), _IDS_CHUNK_SIZE):
            chunk = ids[start:start + _IDS_CHUNK_SIZE]
            models = self._session.exec(statement.where(col(MediaModel.id).in_(chunk))).all()
            records.extend(self._to_entity(model) for model in models)
        return records

    def get_by_id(self, media_id: int, include_deleted: bool = False) -> Optional[MediaRecord]:
        """Recupere un media par son ID."""
        if not fits_sql_integer(media_id):
            return None
        model = self._session.get(MediaModel, media_id)
        if model is None:
            return None
        if model.deleted_at is not None and not include_deleted:
            return None
        return self._to_entity(model)

    def save(self, record: MediaRecord) -> MediaRecord:
        """Sauvegarde un media (insertion ou mise a jour)."""
        existing = None
        if record.id is not None:
            existing = self._session.get(MediaModel, record.id)

        if existing:
            # Mise a jour
            model = self._apply(existing, record)
            model.updated_at = utcnow()
        else:
            # Insertion
            model = self._apply(
                MediaModel(title=record.title, format=MediaFormat(record.format).value, year=record.year),
                record,
            )
            if record.id is not None:
                model.id = record.id

        self._session.add(model)
        self._session.commit()
        self._session.refresh(model)
        return self._to_entity(model)

    def soft_delete(self, media_id: int) -> bool:
        """Supprime logiquement un media. Retourne True si supprime."""
        if not fits_sql_integer(media_id):
            return False
        model = self._session.get(MediaModel, media_id)
        if model is None or model.deleted_at is not None:
            return False
        model.deleted_at = utcnow()
        self._session.add(model)
        self._session.commit()
        return True

    def list_all(self, include_deleted: bool = False) -> list[MediaRecord]:
        """Liste tous les medias, toutes categories confondues."""
        statement = select(MediaModel).order_by(col(MediaModel.id))
        if not include_deleted:
            statement = statement.where(col(MediaModel.deleted_at).is_(None))
        models = self._session.exec(statement).all()
        return [self._to_entity(model) for model in models]
