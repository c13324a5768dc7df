"""
Dépendances partagées de l'application web.

Fournit les services du catalogue, résolus depuis le Container DI
attaché à l'application par le lifespan. Les tests remplacent ces
dépendances via app.dependency_overrides.
"""

from fastapi import Request

from ..config import Settings
from ..container import Container
from ..services.catalog import CatalogQueryService
from ..services.media_service import MediaService
from ..services.statistics import StatisticsService


def get_container(request: Request) -> Container:
    """Container DI de l'application."""
    return request.app.state.container


def get_settings(request: Request) -> Settings:
    return get_container(request).config()


def get_catalog_service(request: Request) -> CatalogQueryService:
    return get_container(request).catalog_service()


def get_media_service(request: Request) -> MediaService:
    return get_container(request).media_service()


def get_statistics_service(request: Request) -> StatisticsService:
    return get_container(request).statistics_service()
