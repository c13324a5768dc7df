"""
Entites metier representant les concepts centraux du domaine.

Les entites sont des objets mutables avec une identite qui persiste dans le temps.

Exports:
- MediaRecord: Une entree du catalogue (film ou serie) avec son sac d'attributs
"""

from filmotheque.core.entities.media import MediaRecord

__all__ = [
    "MediaRecord",
]
