"""
Interface port pour la recherche plein texte.

La recherche plein texte (pertinence, tokenisation, tolérance aux fautes)
est une capacité externe : le catalogue ne la calcule pas, il consomme
uniquement l'ensemble des IDs candidats retourné par le fournisseur.

Le fournisseur est cohérent à terme avec le stockage : une mise à jour
d'index peut suivre une écriture avec un délai borné.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


class SearchUnavailableError(Exception):
    """
    Exception levée quand le fournisseur de recherche est indisponible.

    Distincte d'une recherche sans résultat : un ensemble vide est un
    résultat normal, cette exception signale un échec (timeout, erreur
    réseau, réponse en erreur).
    """

    def __init__(self, message: str = "Recherche indisponible") -> None:
        super().__init__(message)


@dataclass(frozen=True)
class SearchIndexEntry:
    """
    Projection d'un média dans l'index de recherche.

    Attributs :
        id : ID du média dans le stockage
        title : Titre affiché
        year : Année de sortie
    """

    id: int
    title: str
    year: int


class ISearchProvider(ABC):
    """
    Interface d'un fournisseur de recherche plein texte.

    search() est le seul appel du moteur de requête. index() et remove()
    sont appelés par le chemin d'écriture pour maintenir l'index.
    """

    @abstractmethod
    async def search(self, term: str) -> set[int]:
        """
        Recherche les médias correspondant au terme.

        Args :
            term : Terme de recherche (non vide)

        Retourne :
            Ensemble non ordonné des IDs candidats (éventuellement vide)

        Lève :
            SearchUnavailableError : Si le fournisseur échoue
        """
        ...

    @abstractmethod
    async def index(self, entry: SearchIndexEntry) -> None:
        """Ajoute ou remplace l'entrée d'index d'un média."""
        ...

    @abstractmethod
    async def remove(self, media_id: int) -> None:
        """Retire l'entrée d'index d'un média (sans erreur si absente)."""
        ...

    @abstractmethod
    async def clear(self) -> None:
        """Vide entièrement l'index (avant reconstruction)."""
        ...
