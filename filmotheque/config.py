"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe FILMOTHEQUE_,
et peut optionnellement être fournie via un fichier .env.

Le moteur de recherche par défaut est la base de données elle-même ; Meilisearch
est activé via FILMOTHEQUE_SEARCH_DRIVER=meilisearch.
"""

from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Trouver le fichier .env à la racine du projet (parent de filmotheque/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe FILMOTHEQUE_.
    Exemple : FILMOTHEQUE_LOG_LEVEL=DEBUG

    Les chemins sont automatiquement étendus (~ -> répertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="FILMOTHEQUE_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Base de données
    database_url: str = Field(default="sqlite:///filmotheque.db")

    # Recherche plein texte
    search_driver: Literal["database", "meilisearch"] = Field(default="database")
    meilisearch_url: str = Field(default="http://localhost:7700")
    meilisearch_api_key: Optional[str] = Field(default=None)
    meilisearch_index: str = Field(default="films")
    search_timeout_seconds: float = Field(default=5.0, gt=0)

    # Pagination du catalogue
    page_size_min: int = Field(default=10, ge=1)
    page_size_max: int = Field(default=100, ge=1)
    page_size_default: int = Field(default=10, ge=1)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/filmotheque.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @model_validator(mode="after")
    def check_page_sizes(self) -> "Settings":
        """Vérifie min <= défaut <= max pour la taille de page."""
        if not self.page_size_min <= self.page_size_default <= self.page_size_max:
            raise ValueError("page_size_min <= page_size_default <= page_size_max attendu")
        return self

    @property
    def meilisearch_enabled(self) -> bool:
        """Vérifie si la recherche passe par Meilisearch."""
        return self.search_driver == "meilisearch"
