"""
Filmotheque - Catalogue personnel de supports physiques (DVD, Blu-ray, VHS).

Ce package fournit le moteur de requete du catalogue : filtres structurels,
recherche plein texte deleguee, tri deterministe et pagination.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entites, ports, objets valeur)
- services/ : Couche application (moteur de requete, cycle de vie, statistiques)
- adapters/ : Couche infrastructure (CLI, moteurs de recherche)
- infrastructure/ : Persistance SQLModel
- web/ : API JSON FastAPI
"""

__version__ = "0.1.0"
