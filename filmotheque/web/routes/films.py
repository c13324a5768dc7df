"""
Routes des films : navigation du catalogue et cycle de vie.

GET /films accepte des parametres bruts (chaines) : les valeurs invalides
ne provoquent pas d'erreur mais retombent sur les valeurs par defaut.
"""

from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from ...config import Settings
from ...core.value_objects import FilterCriteria, MediaFormat
from ...services.catalog import CatalogQueryService
from ...services.media_service import MediaService
from ..deps import get_catalog_service, get_media_service, get_settings
from ..schemas import FilmListResponse, FilmOut, FilmPayload

router = APIRouter()


@router.get("/films", response_model=FilmListResponse)
async def list_films(
    catalog: Annotated[CatalogQueryService, Depends(get_catalog_service)],
    settings: Annotated[Settings, Depends(get_settings)],
    q: Optional[str] = None,
    format: Optional[str] = None,
    year: Optional[str] = None,
    language: Optional[str] = None,
    country: Optional[str] = None,
    director: Optional[str] = None,
    sort: Optional[str] = None,
    direction: Optional[str] = None,
    page: Optional[str] = None,
    page_size: Annotated[Optional[str], Query(alias="pageSize")] = None,
    per_page: Annotated[Optional[str], Query(alias="perPage")] = None,
):
    """Liste paginee des films avec recherche, filtres et tri."""
    criteria = FilterCriteria.from_query_params(
        q=q,
        format=format,
        year=year,
        language=language,
        country=country,
        director=director,
        sort=sort,
        direction=direction,
        page=page,
        page_size=page_size if page_size is not None else per_page,
        default_page_size=settings.page_size_default,
    )
    result = await catalog.browse(criteria)
    return FilmListResponse.from_result(result)


@router.get("/films/{media_id}", response_model=FilmOut)
async def get_film(
    media_id: int,
    service: Annotated[MediaService, Depends(get_media_service)],
):
    """Detail d'un film."""
    return FilmOut.from_record(service.get_film(media_id))


@router.post("/films", response_model=FilmOut, status_code=status.HTTP_201_CREATED)
async def create_film(
    payload: FilmPayload,
    service: Annotated[MediaService, Depends(get_media_service)],
):
    """Cree un film."""
    record = await service.create_film(
        title=payload.title,
        format=payload.format,
        year=payload.year,
        attributes=payload.attributes_dict(),
        poster_path=payload.poster_path,
    )
    return FilmOut.from_record(record)


@router.put("/films/{media_id}", response_model=FilmOut)
async def update_film(
    media_id: int,
    payload: FilmPayload,
    service: Annotated[MediaService, Depends(get_media_service)],
):
    """Remplace les donnees d'un film."""
    record = await service.update_film(
        media_id,
        title=payload.title,
        format=payload.format,
        year=payload.year,
        attributes=payload.attributes_dict(),
        poster_path=payload.poster_path,
    )
    return FilmOut.from_record(record)


@router.delete("/films/{media_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_film(
    media_id: int,
    service: Annotated[MediaService, Depends(get_media_service)],
) -> Response:
    """Supprime logiquement un film."""
    await service.delete_film(media_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/formats", response_model=list[str])
async def list_formats():
    """Formats de support disponibles."""
    return MediaFormat.values()
