"""
Backup Infrastructure - Sauvegarde automatisee.

Responsabilite:
---------------
Gerer les sauvegardes PostgreSQL et des fichiers uploades.

Features:
---------
- Dump SQL (pg_dump) et archive des uploads (tar) en parallele
- Retention configurable (nombre maximum d'artefacts)
- Restauration d'un dump ou d'une archive
- Backup periodique (APScheduler)
"""

from incident_backup.infrastructure.backup.config import BackupSettings, get_backup_settings
from incident_backup.infrastructure.backup.retention import RetentionEnforcer
from incident_backup.infrastructure.backup.scheduler import BackupScheduler, start_backup_scheduler
from incident_backup.infrastructure.backup.service import BackupService
from incident_backup.infrastructure.backup.store import BackupStore

__all__ = [
    "BackupSettings",
    "get_backup_settings",
    "BackupStore",
    "RetentionEnforcer",
    "BackupService",
    "BackupScheduler",
    "start_backup_scheduler",
]
