"""Routers de l'API web."""
