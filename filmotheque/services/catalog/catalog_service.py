"""
Service de requete du catalogue.

Orchestre les etapes d'une requete :
1. Recherche plein texte optionnelle (IDs candidats du fournisseur externe)
2. Requete selective vers le stockage + predicat structurel complet
3. Tri deterministe
4. Pagination
5. Facette des realisateurs (catalogue entier, independante des criteres)

La recherche ne fait que restreindre le resultat : un ensemble de
candidats vide donne une page vide, sans repli sur les filtres seuls.
"""

from typing import Optional

from loguru import logger

from filmotheque.core.entities.media import MediaRecord
from filmotheque.core.ports.repositories import CatalogQuery, IMediaRepository
from filmotheque.core.ports.search import ISearchProvider, SearchUnavailableError
from filmotheque.core.value_objects import PAGE_SIZE_MAX, PAGE_SIZE_MIN, FilterCriteria

from .dataclasses import CatalogPage, CatalogResult
from .facets import distinct_directors
from .filter_pipeline import build_predicate, build_query
from .paginator import clamp_page_size, paginate
from .sorter import order_records


class CatalogQueryService:
    """
    Moteur de requete du catalogue de films.

    Sans etat entre deux appels : chaque requete est une fonction pure de
    (etat du stockage, criteres). Le seul appel suspendu est la recherche
    plein texte, sans timeout ni retry internes.
    """

    def __init__(
        self,
        media_repo: IMediaRepository,
        search_provider: ISearchProvider,
        page_size_min: int = PAGE_SIZE_MIN,
        page_size_max: int = PAGE_SIZE_MAX,
    ) -> None:
        """
        Initialise le service.

        Args:
            media_repo: Stockage des medias
            search_provider: Fournisseur de recherche plein texte
            page_size_min: Borne basse de la taille de page
            page_size_max: Borne haute de la taille de page
        """
        self._media_repo = media_repo
        self._search_provider = search_provider
        self._page_size_min = page_size_min
        self._page_size_max = page_size_max

    async def browse(self, criteria: FilterCriteria) -> CatalogResult:
        """
        Execute une requete complete : page de resultats + facettes.

        Raises:
            SearchUnavailableError: Si le fournisseur de recherche echoue
        """
        page = await self.find(criteria)
        return CatalogResult(
            criteria=criteria,
            page=page,
            directors=self.directors(),
        )

    async def find(self, criteria: FilterCriteria) -> CatalogPage:
        """
        Retourne la page de films correspondant aux criteres.

        Raises:
            SearchUnavailableError: Si le fournisseur de recherche echoue
        """
        records = await self.matching_records(criteria)
        ordered = order_records(records, criteria.sort_field, criteria.sort_direction)
        return paginate(
            ordered,
            page=criteria.page,
            page_size=criteria.page_size,
            minimum=self._page_size_min,
            maximum=self._page_size_max,
        )

    async def matching_records(self, criteria: FilterCriteria) -> list[MediaRecord]:
        """
        Retourne tous les films acceptes par les criteres (non tries).

        Raises:
            SearchUnavailableError: Si le fournisseur de recherche echoue
        """
        candidate_ids: Optional[set[int]] = None
        if criteria.has_search:
            candidate_ids = await self._search(criteria.search_term)
            if not candidate_ids:
                logger.debug(f"Aucun candidat pour la recherche: {criteria.search_term!r}")
                return []

        query = build_query(criteria, ids=candidate_ids)
        predicate = build_predicate(criteria)
        records = [r for r in self._media_repo.find_films(query) if predicate(r)]
        if candidate_ids is not None:
            # Intersection stricte, meme si le stockage ignore la restriction par IDs
            records = [r for r in records if r.id in candidate_ids]

        logger.debug(
            f"Requete catalogue: {len(records)} film(s)",
            format=criteria.format,
            year=criteria.year,
            language=criteria.language,
            country=criteria.country,
            director=criteria.director,
            search=criteria.search_term,
        )
        return records

    def directors(self) -> list[str]:
        """Facette des realisateurs sur l'ensemble du catalogue de films."""
        return distinct_directors(self._media_repo.find_films(CatalogQuery()))

    def effective_page_size(self, page_size: int) -> int:
        """Taille de page effectivement appliquee pour une taille demandee."""
        return clamp_page_size(page_size, self._page_size_min, self._page_size_max)

    async def _search(self, term: str) -> set[int]:
        """Interroge le fournisseur de recherche et journalise les echecs."""
        try:
            return set(await self._search_provider.search(term))
        except SearchUnavailableError as e:
            logger.warning(f"Recherche indisponible pour {term!r}: {e}")
            raise
