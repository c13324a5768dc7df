"""
Couche domaine (core).

Contient les entites metier, ports (interfaces abstraites), et objets valeur.
Cette couche n'a AUCUNE dependance vers l'infrastructure (adapters, frameworks, BDD).

Sous-packages :
- entities/ : Entites metier (MediaRecord)
- ports/ : Interfaces abstraites definissant les contrats pour les adaptateurs
- value_objects/ : Objets valeur immutables (MediaFormat, FilterCriteria, ...)
"""
