"""Utilitaires partages (helpers de titres, constantes)."""
