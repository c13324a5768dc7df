"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Les ports sont les frontières de l'architecture hexagonale. Ils définissent
ce dont le domaine a besoin du monde extérieur sans spécifier
comment ces besoins sont satisfaits.

Ports repository : Contrats de persistance des données
- IMediaRepository : Stockage des médias du catalogue
- CatalogQuery : Requête sélective poussée vers le stockage
- MediaNotFoundError : Média introuvable

Ports recherche : Contrats pour la recherche plein texte externe
- ISearchProvider : Fournisseur de recherche (IDs candidats)
- SearchIndexEntry : Projection d'un média dans l'index
- SearchUnavailableError : Échec du fournisseur de recherche
"""

from filmotheque.core.ports.repositories import (
    CatalogQuery,
    IMediaRepository,
    MediaNotFoundError,
)
from filmotheque.core.ports.search import (
    ISearchProvider,
    SearchIndexEntry,
    SearchUnavailableError,
)

__all__ = [
    # Repositories
    "IMediaRepository",
    "CatalogQuery",
    "MediaNotFoundError",
    # Recherche
    "ISearchProvider",
    "SearchIndexEntry",
    "SearchUnavailableError",
]
