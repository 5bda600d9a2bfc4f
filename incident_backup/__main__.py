#!/usr/bin/env python3
"""
CLI d'administration des sauvegardes.

Usage:
    python -m incident_backup backup {database,files,full}
    python -m incident_backup restore {database,files} <fichier>
    python -m incident_backup list
    python -m incident_backup schedule [--interval-hours N]

Variables d'environnement:
    DATABASE_URL, BACKUP_DIR, MAX_BACKUPS, UPLOADS_DIR (voir BackupSettings)
"""

import argparse
import signal
import sys
import threading
from typing import Optional, Sequence

from incident_backup.domain.exceptions import BackupError
from incident_backup.infrastructure.backup import BackupScheduler, BackupService, get_backup_settings
from incident_backup.infrastructure.logging import configure_logging


def build_parser() -> argparse.ArgumentParser:
    """Construit le parser de la ligne de commande."""
    parser = argparse.ArgumentParser(
        prog="incident_backup",
        description="Sauvegarde et restauration de la plateforme d'incidents",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    backup = commands.add_parser("backup", help="Cree une sauvegarde")
    backup.add_argument("target", choices=["database", "files", "full"])

    restore = commands.add_parser("restore", help="Restaure une sauvegarde (destructif)")
    restore.add_argument("target", choices=["database", "files"])
    restore.add_argument("path", help="Artefact a restaurer")

    commands.add_parser("list", help="Liste les sauvegardes disponibles")

    schedule = commands.add_parser("schedule", help="Sauvegardes periodiques (bloquant)")
    schedule.add_argument("--interval-hours", type=float, default=None)

    return parser


def run_backup(service: BackupService, target: str) -> None:
    """Execute la sauvegarde demandee et affiche les chemins produits."""
    if target == "database":
        print(service.create_database_backup())
    elif target == "files":
        print(service.create_file_backup())
    else:
        result = service.create_full_backup()
        print(result.database_path)
        print(result.files_path)


def run_restore(service: BackupService, target: str, path: str) -> None:
    """Execute la restauration demandee."""
    if target == "database":
        service.restore_database(path)
    else:
        service.restore_files(path)


def run_list(service: BackupService) -> None:
    """Affiche les artefacts, du plus recent au plus ancien."""
    artifacts = sorted(
        service.list_artifacts(),
        key=lambda a: a.path.stat().st_mtime if a.path.exists() else 0.0,
        reverse=True,
    )
    for artifact in artifacts:
        print(f"{artifact.kind.value:<18} {artifact.name}")


def run_schedule(service: BackupService, interval_hours: Optional[float]) -> None:
    """Demarre le scheduler et bloque jusqu'a SIGTERM ou Ctrl+C."""
    stop_event = threading.Event()
    signal.signal(signal.SIGTERM, lambda *_: stop_event.set())

    scheduler = BackupScheduler(service).schedule(interval_hours)
    try:
        while not stop_event.wait(1):
            pass
    except KeyboardInterrupt:
        pass
    finally:
        scheduler.stop()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Point d'entree de la CLI."""
    args = build_parser().parse_args(argv)

    settings = get_backup_settings()
    configure_logging(json_logs=settings.json_logs, log_level=settings.log_level)

    try:
        service = BackupService(settings)

        if args.command == "backup":
            run_backup(service, args.target)
        elif args.command == "restore":
            run_restore(service, args.target, args.path)
        elif args.command == "list":
            run_list(service)
        elif args.command == "schedule":
            run_schedule(service, args.interval_hours)

    except BackupError as e:
        print(f"Erreur: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        # Backup Store non creable (repertoire en lecture seule, disque plein...)
        print(f"Erreur: Backup Store inaccessible: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
