"""
Couche application : cas d'utilisation du catalogue.

- catalog/ : Moteur de requete (filtres, recherche, tri, pagination, facettes)
- media_service : Cycle de vie des films (creation, mise a jour, suppression)
- statistics : Distributions du tableau de bord
"""
