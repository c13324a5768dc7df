"""
Constantes globales pour Filmotheque.

Ce module contient les constantes partagees par les services :
- Article retire de la cle de tri des titres
- Cles du sac d'attributs lues par le catalogue
- Bornes des entiers acceptes par la base
"""

# Seul article retire pour le tri alphabetique (minuscules, espace inclus)
ORDERABLE_TITLE_ARTICLE = "the "

# Cles du sac d'attributs d'un film
ATTR_GENRES = "genres"
ATTR_DIRECTORS = "directors"
ATTR_COUNTRIES = "countries"
ATTR_LANGUAGES = "languages"

# INTEGER SQLite (entier signe sur 64 bits)
SQL_INTEGER_MIN = -(2**63)
SQL_INTEGER_MAX = 2**63 - 1
