"""
Schemas pydantic de l'API web.

Valident les donnees entrantes (creation/modification d'un film) et
decrivent les reponses JSON. Une entree invalide produit une erreur 422.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from filmotheque.core.entities.media import MediaRecord
from filmotheque.core.value_objects import MediaFormat
from filmotheque.services.catalog import CatalogResult
from filmotheque.services.statistics import DashboardStats


class CodeName(BaseModel):
    """Element {code, name} d'une liste de pays ou de langues."""

    code: str = Field(min_length=1)
    name: str = Field(min_length=1)


class FilmAttributes(BaseModel):
    """
    Sac d'attributs d'un film.

    Toutes les cles sont optionnelles ; les cles inconnues sont conservees.
    """

    model_config = ConfigDict(extra="allow")

    genres: Optional[list[str]] = None
    directors: Optional[list[str]] = None
    description: Optional[str] = None
    tagline: Optional[str] = None
    countries: Optional[list[CodeName]] = None
    languages: Optional[list[CodeName]] = None
    run_time: Optional[int] = Field(default=None, ge=0)


class FilmPayload(BaseModel):
    """Corps de requete pour creer ou remplacer un film."""

    title: str
    format: MediaFormat
    year: int
    attributes: FilmAttributes = Field(default_factory=FilmAttributes)
    poster_path: Optional[str] = None

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("le titre est obligatoire")
        return v

    def attributes_dict(self) -> dict[str, Any]:
        """Sac d'attributs sans les cles absentes."""
        return self.attributes.model_dump(exclude_none=True)


class FilmOut(BaseModel):
    """Representation JSON d'un film."""

    id: int
    title: str
    orderable_title: str
    format: str
    year: int
    attributes: dict[str, Any]
    poster_path: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_record(cls, record: MediaRecord) -> "FilmOut":
        return cls(
            id=record.id,
            title=record.title,
            orderable_title=record.orderable_title,
            format=MediaFormat(record.format).value,
            year=record.year,
            attributes=record.attributes or {},
            poster_path=record.poster_path,
            created_at=record.created_at,
            updated_at=record.updated_at,
        )


class PageMeta(BaseModel):
    """Metadonnees de pagination."""

    total: int
    page: int
    page_size: int
    last_page: int


class AppliedFilters(BaseModel):
    """Criteres effectivement appliques (apres normalisation)."""

    q: str
    format: Optional[str] = None
    year: Optional[int] = None
    language: Optional[str] = None
    country: Optional[str] = None
    director: Optional[str] = None
    sort: str
    direction: str


class FilmListResponse(BaseModel):
    """Page de films, metadonnees et facette des realisateurs."""

    data: list[FilmOut]
    meta: PageMeta
    filters: AppliedFilters
    directors: list[str]

    @classmethod
    def from_result(cls, result: CatalogResult) -> "FilmListResponse":
        criteria = result.criteria
        page = result.page
        return cls(
            data=[FilmOut.from_record(r) for r in page.items],
            meta=PageMeta(
                total=page.total,
                page=page.page,
                page_size=page.page_size,
                last_page=page.last_page,
            ),
            filters=AppliedFilters(
                q=criteria.search_term,
                format=criteria.format,
                year=criteria.year,
                language=criteria.language,
                country=criteria.country,
                director=criteria.director,
                sort=criteria.sort_field.value,
                direction=criteria.sort_direction.value,
            ),
            directors=result.directors,
        )


class DistributionOut(BaseModel):
    name: str
    count: int


class DashboardOut(BaseModel):
    """Statistiques du tableau de bord."""

    films_count: int
    genres: list[DistributionOut]
    directors: list[DistributionOut]
    decades: list[DistributionOut]
    languages: list[DistributionOut]

    @classmethod
    def from_stats(cls, stats: DashboardStats) -> "DashboardOut":
        def convert(items):
            return [DistributionOut(name=i.name, count=i.count) for i in items]

        return cls(
            films_count=stats.films_count,
            genres=convert(stats.genres),
            directors=convert(stats.directors),
            decades=convert(stats.decades),
            languages=convert(stats.languages),
        )
