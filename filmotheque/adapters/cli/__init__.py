"""
Interface en ligne de commande du catalogue.

Les commandes sont montees sur l'application Typer dans filmotheque/main.py.
"""
