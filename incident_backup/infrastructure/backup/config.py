"""
Backup Config - Configuration des sauvegardes.

Responsabilite unique:
----------------------
Configurer les parametres de backup.

Variables:
----------
- DATABASE_URL: Connexion PostgreSQL (requise pour dump et restauration)
- BACKUP_DIR: Repertoire du Backup Store
- MAX_BACKUPS: Nombre maximum d'artefacts conserves
- UPLOADS_DIR: Repertoire des fichiers uploades a archiver
- BACKUP_INTERVAL_HOURS: Intervalle du scheduler
- ENVIRONMENT: Le scheduler ne demarre qu'en "production"
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class BackupSettings(BaseSettings):
    """
    Configuration des sauvegardes.

    Chargee depuis les variables d'environnement. Immuable une fois
    construite: la meme instance est partagee par tous les composants.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    # Base de donnees
    database_url: str = ""

    # Backup Store
    backup_dir: str = "backups"
    max_backups: int = Field(default=7, ge=1)

    # Contenu uploade
    uploads_dir: str = "uploads"
    restore_root: Optional[str] = None  # None = repertoire courant

    # Retention
    retention_scope: Literal["combined", "per_kind"] = "combined"
    retention_after_file_backup: bool = False

    # Schedule
    environment: str = "development"
    backup_interval_hours: float = Field(default=24, gt=0)
    scheduler_max_instances: int = Field(default=1, ge=1)

    # Commandes externes
    pg_dump_bin: str = "pg_dump"
    psql_bin: str = "psql"
    tar_bin: str = "tar"

    # Logging
    log_level: str = "INFO"
    json_logs: bool = False

    @property
    def backup_path(self) -> Path:
        """Retourne le chemin du Backup Store."""
        return Path(self.backup_dir)

    @property
    def uploads_path(self) -> Path:
        """Retourne le chemin des uploads."""
        return Path(self.uploads_dir)

    @property
    def restore_path(self) -> Optional[Path]:
        """Retourne le repertoire de restauration des fichiers."""
        return Path(self.restore_root) if self.restore_root else None

    @property
    def is_production(self) -> bool:
        """Retourne True en environnement de production."""
        return self.environment.lower() == "production"


@lru_cache
def get_backup_settings() -> BackupSettings:
    """Retourne la configuration backup (cached)."""
    return BackupSettings()
