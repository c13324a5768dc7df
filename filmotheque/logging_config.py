"""
Configuration du logging de Filmotheque via loguru.

Deux sorties :
- console : messages du catalogue, niveau regle par la configuration
  puis ajuste par -v / -q en ligne de commande
- fichier : tout a partir de DEBUG, en JSON avec rotation, pour relire
  les requetes du catalogue (criteres, candidats, nombre de resultats)
"""

import sys
from typing import Optional

from loguru import logger

from .config import Settings

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)

# -v, -vv : du plus au moins bavard
_VERBOSE_LEVELS = {1: "INFO", 2: "DEBUG"}


def console_level(default: str, verbose: int = 0, quiet: bool = False) -> str:
    """
    Niveau de la sortie console selon les options de verbosite.

    -q l'emporte sur -v. Au-dela de -vv, le niveau reste DEBUG.
    """
    if quiet:
        return "ERROR"
    if verbose <= 0:
        return default.upper()
    return _VERBOSE_LEVELS.get(verbose, "DEBUG")


def configure_logging(settings: Settings, level: Optional[str] = None) -> None:
    """
    (Re)configure les sorties loguru.

    Args:
        settings: Parametres log_level, log_file, log_rotation_size,
            log_retention_count
        level: Niveau console impose, sinon settings.log_level
    """
    logger.remove()

    logger.add(
        sys.stderr,
        level=(level or settings.log_level).upper(),
        format=CONSOLE_FORMAT,
        colorize=True,
    )

    settings.log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        settings.log_file,
        level="DEBUG",
        format="{message}",
        serialize=True,
        rotation=settings.log_rotation_size,
        retention=settings.log_retention_count,
        compression="zip",
        enqueue=True,
    )

    logger.bind(log_file=str(settings.log_file)).debug("Journalisation configuree")
