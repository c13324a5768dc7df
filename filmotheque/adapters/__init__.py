"""
Adaptateurs : implementations concretes des ports du domaine.

- search : fournisseurs de recherche plein texte (base, Meilisearch)
- cli : commandes Typer du catalogue
"""
