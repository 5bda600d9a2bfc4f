"""
BackupService - Sauvegarde et restauration PostgreSQL + uploads.

Responsabilite unique:
----------------------
Produire, restaurer et lister les artefacts de sauvegarde.

Usage:
------
    service = BackupService(settings)
    result = service.create_full_backup()
    service.restore_database(result.database_path)

Limites connues:
----------------
- Les deux artefacts d'une sauvegarde complete sont produits
  independamment: aucune atomicite entre dump et archive.
- Un echec laisse le fichier partiel sur le disque.
- Aucun timeout sur les commandes externes.
"""

from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, List, Optional

from incident_backup.application.ports.command_runner import CommandRunner
from incident_backup.domain.entities.backup_artifact import (
    ArtifactKind,
    BackupArtifact,
    FullBackupResult,
    make_timestamp,
)
from incident_backup.domain.exceptions import ConfigurationError
from incident_backup.infrastructure.backup.config import BackupSettings
from incident_backup.infrastructure.backup.retention import RetentionEnforcer
from incident_backup.infrastructure.backup.store import BackupStore
from incident_backup.infrastructure.logging import get_logger
from incident_backup.infrastructure.process.subprocess_runner import SubprocessCommandRunner

logger = get_logger(__name__)


class BackupService:
    """
    Service de sauvegarde de la plateforme.

    Cree, liste et restaure les dumps SQL et les archives d'uploads.
    """

    def __init__(
        self,
        settings: BackupSettings,
        runner: Optional[CommandRunner] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """
        Initialise le service de backup.

        Args:
            settings: Configuration des sauvegardes.
            runner: Execution des commandes externes (defaut: subprocess).
            clock: Source de l'heure courante (defaut: UTC systeme).
        """
        self._settings = settings
        self._runner = runner or SubprocessCommandRunner()
        self._clock = clock or (lambda: datetime.now(timezone.utc))

        self._store = BackupStore(settings.backup_path)
        self._store.ensure()

        self._retention = RetentionEnforcer(
            self._store,
            max_backups=settings.max_backups,
            scope=settings.retention_scope,
        )

    @property
    def settings(self) -> BackupSettings:
        """Configuration du service."""
        return self._settings

    @property
    def store(self) -> BackupStore:
        """Backup Store du service."""
        return self._store

    def create_database_backup(self) -> Path:
        """
        Cree un dump SQL de la base de donnees.

        Declenche la retention apres un dump reussi.

        Returns:
            Chemin du fichier database-<timestamp>.sql.

        Raises:
            ConfigurationError: DATABASE_URL non configure.
            ProcessExecutionError: pg_dump a echoue.
        """
        timestamp = make_timestamp(self._clock())
        backup_file = self._store.artifact_path(ArtifactKind.DATABASE, timestamp)

        try:
            database_url = self._require_database_url()
            self._runner.run(
                [self._settings.pg_dump_bin, database_url],
                stdout=backup_file,
            )
        except Exception as e:
            logger.error(
                "database_backup_failed",
                backup_file=str(backup_file),
                timestamp=timestamp,
                error=str(e),
            )
            raise

        logger.info(
            "database_backup_created",
            backup_file=str(backup_file),
            timestamp=timestamp,
        )

        self._retention.enforce()

        return backup_file

    def create_file_backup(self) -> Path:
        """
        Archive le repertoire des uploads.

        Ne declenche pas la retention, sauf si
        retention_after_file_backup est active.

        Returns:
            Chemin du fichier files-<timestamp>.tar.gz.

        Raises:
            ProcessExecutionError: tar a echoue.
        """
        timestamp = make_timestamp(self._clock())
        backup_file = self._store.artifact_path(ArtifactKind.FILES, timestamp)

        try:
            self._runner.run(
                [self._settings.tar_bin, "-czf", str(backup_file), self._settings.uploads_dir],
            )
        except Exception as e:
            logger.error(
                "file_backup_failed",
                backup_file=str(backup_file),
                timestamp=timestamp,
                error=str(e),
            )
            raise

        logger.info(
            "file_backup_created",
            backup_file=str(backup_file),
            timestamp=timestamp,
        )

        if self._settings.retention_after_file_backup:
            self._retention.enforce()

        return backup_file

    def create_full_backup(self) -> FullBackupResult:
        """
        Cree un dump SQL et une archive des uploads en parallele.

        Les deux producteurs s'executent jusqu'au bout. Si l'un echoue,
        l'artefact de l'autre reste sur le disque.

        Returns:
            FullBackupResult avec les deux chemins.

        Raises:
            ConfigurationError, ProcessExecutionError: Erreur du producteur
            en echec (celle du dump SQL si les deux echouent).
        """
        try:
            with ThreadPoolExecutor(max_workers=2, thread_name_prefix="backup_worker") as executor:
                database_future = executor.submit(self.create_database_backup)
                files_future = executor.submit(self.create_file_backup)

                # Attendre les deux branches avant de propager une erreur
                database_error = database_future.exception()
                files_error = files_future.exception()

            if database_error is not None:
                raise database_error
            if files_error is not None:
                raise files_error

            result = FullBackupResult(
                database_path=database_future.result(),
                files_path=files_future.result(),
            )

        except Exception as e:
            logger.error(
                "full_backup_failed",
                error=str(e),
                error_type=type(e).__name__,
            )
            raise

        logger.info(
            "full_backup_completed",
            database_backup=str(result.database_path),
            files_backup=str(result.files_path),
        )

        return result

    def restore_database(self, backup_file: Path | str) -> None:
        """
        Rejoue un dump SQL dans la base de donnees.

        Aucune verification prealable: un fichier absent se traduit
        par une ProcessExecutionError.

        Warning:
            Cette operation ecrase les donnees existantes!

        Raises:
            ConfigurationError: DATABASE_URL non configure.
            ProcessExecutionError: psql a echoue.
        """
        backup_file = Path(backup_file)

        logger.warning("database_restore_started", backup_file=str(backup_file))

        try:
            database_url = self._require_database_url()
            self._runner.run(
                [self._settings.psql_bin, database_url],
                stdin=backup_file,
            )
        except Exception as e:
            logger.error(
                "database_restore_failed",
                backup_file=str(backup_file),
                error=str(e),
            )
            raise

        logger.info("database_restored", backup_file=str(backup_file))

    def restore_files(self, backup_file: Path | str) -> None:
        """
        Extrait une archive d'uploads dans le repertoire de restauration.

        Les fichiers existants sont ecrases selon le comportement de tar.

        Raises:
            ProcessExecutionError: tar a echoue.
        """
        backup_file = Path(backup_file)
        # tar s'execute dans restore_root: le chemin relatif reste celui de l'appelant
        archive = backup_file.absolute()

        logger.warning("files_restore_started", backup_file=str(backup_file))

        try:
            self._runner.run(
                [self._settings.tar_bin, "-xzf", str(archive)],
                cwd=self._settings.restore_path,
            )
        except Exception as e:
            logger.error(
                "files_restore_failed",
                backup_file=str(backup_file),
                error=str(e),
            )
            raise

        logger.info("files_restored", backup_file=str(backup_file))

    def list_backups(self) -> List[str]:
        """
        Liste les noms des artefacts disponibles.

        Ordre non garanti. Ne leve jamais.
        """
        return self._store.list_backups()

    def list_artifacts(self) -> List[BackupArtifact]:
        """Liste les artefacts disponibles sous forme d'entites."""
        return self._store.list_artifacts()

    def cleanup_old_backups(self) -> int:
        """Execute une passe de retention et retourne le nombre de suppressions."""
        return self._retention.enforce()

    def _require_database_url(self) -> str:
        """Retourne DATABASE_URL ou leve ConfigurationError."""
        if not self._settings.database_url:
            raise ConfigurationError("DATABASE_URL")
        return self._settings.database_url
