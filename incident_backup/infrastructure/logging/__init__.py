"""
Logging Infrastructure - Journal des operations de sauvegarde.

Les modules du gestionnaire obtiennent leur logger via get_logger(__name__);
le point d'entree (CLI ou serveur) appelle configure_logging() une fois.
"""

from incident_backup.infrastructure.logging.config import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
