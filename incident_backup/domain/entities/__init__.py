"""Entites du domaine des sauvegardes."""

from incident_backup.domain.entities.backup_artifact import (
    ArtifactKind,
    BackupArtifact,
    FullBackupResult,
    make_timestamp,
)

__all__ = ["ArtifactKind", "BackupArtifact", "FullBackupResult", "make_timestamp"]
