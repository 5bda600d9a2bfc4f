"""
Logging Config - Evenements structures des sauvegardes.

Chaque operation de sauvegarde emet un evenement snake_case accompagne
de son contexte (backup_file, timestamp, error...). Ce module choisit
le rendu de ces evenements selon le deploiement:

- Poste operateur / CLI: rendu console lisible, couleurs sur un terminal
- Production (scheduler non surveille): une ligne JSON par evenement

Les logs partent sur stderr pour que stdout reste exploitable par les
scripts qui lisent les chemins d'artefacts affiches par la CLI.
"""

import logging
import sys
from typing import Optional

import structlog


def configure_logging(
    json_logs: bool = False,
    log_level: str = "INFO",
) -> None:
    """
    Installe le rendu des evenements de sauvegarde.

    A appeler une seule fois, au demarrage du processus (CLI ou
    bootstrap du serveur), avant toute operation de sauvegarde.

    Args:
        json_logs: True en production (JSON), False pour la console.
        log_level: Niveau minimum (DEBUG, INFO, WARNING, ERROR).
    """
    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if json_logs:
        renderers = [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        renderers = [
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
        ]

    structlog.configure(
        processors=shared_processors + renderers,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, log_level.upper()),
    )

    # APScheduler journalise chaque execution de job en INFO
    logging.getLogger("apscheduler").setLevel(logging.WARNING)


def get_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:
    """Logger d'un module du gestionnaire de sauvegardes (passer __name__)."""
    return structlog.get_logger(name)
