"""
Application FastAPI de Filmotheque.

Initialise l'application web avec le Container DI, enregistre la
conversion des erreurs du domaine en reponses HTTP et monte les routes.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from loguru import logger

from .. import __version__
from ..container import Container
from ..core.ports.repositories import MediaNotFoundError
from ..core.ports.search import SearchUnavailableError
from .routes.dashboard import router as dashboard_router
from .routes.films import router as films_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialise le Container DI au démarrage."""
    container = Container()
    container.database.init()
    app.state.container = container
    yield


async def search_unavailable_handler(request: Request, exc: SearchUnavailableError) -> JSONResponse:
    """La recherche en panne n'est jamais presentee comme une page vide."""
    logger.warning(f"Recherche indisponible ({request.url.path}): {exc}")
    return JSONResponse(status_code=503, content={"detail": str(exc)})


async def media_not_found_handler(request: Request, exc: MediaNotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"detail": str(exc)})


def create_app() -> FastAPI:
    """Construit l'application et monte les routes."""
    application = FastAPI(title="Filmotheque", version=__version__, lifespan=lifespan)
    application.add_exception_handler(SearchUnavailableError, search_unavailable_handler)
    application.add_exception_handler(MediaNotFoundError, media_not_found_handler)

    # Routes
    application.include_router(films_router)
    application.include_router(dashboard_router)
    return application


app = create_app()
