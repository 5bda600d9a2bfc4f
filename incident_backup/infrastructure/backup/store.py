"""
BackupStore - Repertoire de stockage des artefacts.

Responsabilite unique:
----------------------
Garantir l'existence du repertoire, nommer les artefacts et servir de
catalogue: il n'y a pas de base de metadonnees, le listing du
repertoire EST le catalogue.
"""

from pathlib import Path

from incident_backup.domain.entities.backup_artifact import (
    ArtifactKind,
    BackupArtifact,
    is_backup_name,
)
from incident_backup.domain.exceptions import StorageDeletionError, StorageEnumerationError
from incident_backup.infrastructure.logging import get_logger

logger = get_logger(__name__)


class BackupStore:
    """
    Backup Store sur le systeme de fichiers local.

    Aucune synchronisation: producteurs, listing et retention accedent
    au repertoire sans verrou.
    """

    def __init__(self, root: Path):
        """
        Initialise le store.

        Args:
            root: Repertoire des artefacts.
        """
        self._root = Path(root)

    @property
    def root(self) -> Path:
        """Repertoire des artefacts."""
        return self._root

    def ensure(self) -> None:
        """Cree le repertoire (et ses parents) s'il n'existe pas."""
        self._root.mkdir(parents=True, exist_ok=True)
        logger.debug("backup_store_ready", backup_dir=str(self._root))

    def artifact_path(self, kind: ArtifactKind, timestamp: str) -> Path:
        """Chemin de l'artefact d'un type donne pour un timestamp."""
        return self._root / kind.filename(timestamp)

    def scan(self) -> list[str]:
        """
        Enumere les noms d'artefacts reconnus (.sql, .tar.gz).

        L'ordre est celui du systeme de fichiers.

        Raises:
            StorageEnumerationError: Repertoire illisible ou absent.
        """
        try:
            return [entry.name for entry in self._root.iterdir() if is_backup_name(entry.name)]
        except OSError as e:
            raise StorageEnumerationError(self._root, str(e)) from e

    def list_backups(self) -> list[str]:
        """
        Liste les artefacts disponibles.

        Ne leve jamais: une erreur de listing est journalisee
        et convertie en liste vide.
        """
        try:
            return self.scan()
        except StorageEnumerationError as e:
            logger.error("backup_listing_failed", backup_dir=str(self._root), error=str(e))
            return []

    def list_artifacts(self) -> list[BackupArtifact]:
        """Liste les artefacts sous forme d'entites (meme politique d'erreur)."""
        artifacts = []
        for name in self.list_backups():
            artifact = BackupArtifact.from_path(self._root / name)
            if artifact is not None:
                artifacts.append(artifact)
        return artifacts

    def modified_time(self, name: str) -> float:
        """Date de derniere modification d'un artefact (epoch)."""
        return (self._root / name).stat().st_mtime

    def delete(self, name: str) -> None:
        """
        Supprime un artefact.

        Raises:
            StorageDeletionError: Suppression impossible.
        """
        path = self._root / name
        try:
            path.unlink()
        except OSError as e:
            raise StorageDeletionError(path, str(e)) from e
