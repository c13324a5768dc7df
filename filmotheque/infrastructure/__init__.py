"""Couche infrastructure : persistance SQLModel du catalogue."""
