"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour les interfaces CLI et Web :
repository SQLModel, fournisseur de recherche (selon search_driver) et services
du catalogue.
"""

from dependency_injector import containers, providers

from .adapters.search import DatabaseSearchProvider, MeilisearchSearchProvider
from .config import Settings
from .infrastructure.persistence.database import get_session, init_db
from .infrastructure.persistence.repositories import SQLModelMediaRepository
from .services.catalog import CatalogQueryService
from .services.media_service import MediaService
from .services.statistics import StatisticsService


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        container.database.init()  # Initialise la DB une fois
        catalog = container.catalog_service()
        page = await catalog.find(criteria)

    Chaque repository (et la recherche en base) recoit une session
    fraiche a chaque resolution.
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Database - Resource pour initialisation unique
    database = providers.Resource(init_db)

    # Session factory - nouvelle session a chaque appel
    session = providers.Factory(lambda: next(get_session()))

    # Repositories - Factory pour nouvelle instance avec session fraiche
    media_repository = providers.Factory(
        SQLModelMediaRepository,
        session=session,
    )

    # Fournisseur de recherche - choisi par FILMOTHEQUE_SEARCH_DRIVER
    search_provider = providers.Selector(
        config.provided.search_driver,
        database=providers.Factory(
            DatabaseSearchProvider,
            session=session,
        ),
        meilisearch=providers.Singleton(
            MeilisearchSearchProvider,
            url=config.provided.meilisearch_url,
            index=config.provided.meilisearch_index,
            api_key=config.provided.meilisearch_api_key,
            timeout=config.provided.search_timeout_seconds,
        ),
    )

    # Services - Factory car dependent de repositories (sessions fraiches)
    catalog_service = providers.Factory(
        CatalogQueryService,
        media_repo=media_repository,
        search_provider=search_provider,
        page_size_min=config.provided.page_size_min,
        page_size_max=config.provided.page_size_max,
    )
    media_service = providers.Factory(
        MediaService,
        media_repo=media_repository,
        search_provider=search_provider,
    )
    statistics_service = providers.Factory(
        StatisticsService,
        media_repo=media_repository,
    )
