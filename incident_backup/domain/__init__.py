"""
Domain Layer - Coeur metier des sauvegardes.

Contient le modele d'artefact de sauvegarde et la taxonomie
des erreurs, independants de l'infrastructure.
"""

from incident_backup.domain.entities.backup_artifact import (
    ArtifactKind,
    BackupArtifact,
    FullBackupResult,
    make_timestamp,
)
from incident_backup.domain.exceptions import (
    BackupError,
    ConfigurationError,
    ProcessExecutionError,
    StorageDeletionError,
    StorageEnumerationError,
)

__all__ = [
    # Entities
    "ArtifactKind",
    "BackupArtifact",
    "FullBackupResult",
    "make_timestamp",
    # Exceptions
    "BackupError",
    "ConfigurationError",
    "ProcessExecutionError",
    "StorageEnumerationError",
    "StorageDeletionError",
]
