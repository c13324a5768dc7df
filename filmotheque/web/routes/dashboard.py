"""
Route du tableau de bord : statistiques du catalogue de films.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from ...services.statistics import StatisticsService
from ..deps import get_statistics_service
from ..schemas import DashboardOut

router = APIRouter()


@router.get("/dashboard", response_model=DashboardOut)
async def dashboard(
    service: Annotated[StatisticsService, Depends(get_statistics_service)],
):
    """Nombre de films et distributions (genres, realisateurs, decennies, langues)."""
    return DashboardOut.from_stats(service.dashboard())
