"""
BackupScheduler - Planificateur de sauvegardes.

Responsabilite unique:
----------------------
Executer une sauvegarde complete immediatement, puis a intervalle fixe
pendant toute la vie du processus.

Usage:
------
    scheduler = BackupScheduler(service)
    scheduler.schedule(24)  # Backup immediat puis toutes les 24h
    scheduler.stop()        # Arrete le scheduler
"""

from typing import Any, Callable, Optional

from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.interval import IntervalTrigger

from incident_backup.infrastructure.backup.config import BackupSettings, get_backup_settings
from incident_backup.infrastructure.backup.service import BackupService
from incident_backup.infrastructure.logging import get_logger

logger = get_logger(__name__)

# Evenements relayes aux administrateurs (notifications systeme)
BACKUP_COMPLETED_EVENT = "system_backup_completed"
BACKUP_FAILED_EVENT = "system_backup_failed"

EventListener = Callable[[str, dict[str, Any]], None]


class BackupScheduler:
    """
    Planificateur de sauvegardes automatiques.

    Aucune erreur d'une execution planifiee n'est propagee: elle est
    journalisee et la suivante s'execute normalement.

    Chevauchement: avec scheduler_max_instances=1 (defaut), un tick qui
    survient pendant un backup encore en cours est ignore par APScheduler.
    Augmenter scheduler_max_instances autorise les executions concurrentes,
    sans aucune protection du Backup Store.
    """

    JOB_ID = "full_backup"

    def __init__(
        self,
        service: BackupService,
        on_event: Optional[EventListener] = None,
    ):
        """
        Initialise le scheduler.

        Args:
            service: Service de sauvegarde.
            on_event: Callback recevant (evenement, donnees) apres chaque execution.
        """
        self._service = service
        self._on_event = on_event
        self._scheduler = BackgroundScheduler()
        self._running = False
        self._interval_hours: Optional[float] = None

    def schedule(self, interval_hours: Optional[float] = None) -> "BackupScheduler":
        """
        Execute un backup complet puis le planifie a intervalle fixe.

        Le premier backup est execute de maniere synchrone avant
        l'armement du timer.

        Args:
            interval_hours: Intervalle entre deux backups (defaut: configuration).

        Returns:
            Le scheduler lui-meme, a arreter avec stop().
        """
        if self._running:
            logger.warning("scheduler_already_running")
            return self

        settings = self._service.settings
        if interval_hours is None:
            interval_hours = settings.backup_interval_hours
        if interval_hours <= 0:
            raise ValueError(f"interval_hours doit etre positif: {interval_hours}")

        self.run_once()

        self._scheduler.add_job(
            self.run_once,
            trigger=IntervalTrigger(hours=interval_hours),
            id=self.JOB_ID,
            name="Backup complet periodique",
            replace_existing=True,
            max_instances=settings.scheduler_max_instances,
        )

        self._scheduler.start()
        self._running = True
        self._interval_hours = interval_hours

        logger.info("backup_scheduler_started", interval_hours=interval_hours)

        return self

    def run_once(self) -> bool:
        """
        Execute un backup complet planifie.

        Ne leve jamais.

        Returns:
            True si le backup a reussi.
        """
        try:
            result = self._service.create_full_backup()
        except Exception as e:
            logger.error(
                "scheduled_backup_failed",
                error=str(e),
                error_type=type(e).__name__,
            )
            self._emit(BACKUP_FAILED_EVENT, {"error": str(e)})
            return False

        logger.info("scheduled_backup_completed")
        self._emit(
            BACKUP_COMPLETED_EVENT,
            {
                "database_backup": str(result.database_path),
                "files_backup": str(result.files_path),
            },
        )
        return True

    def stop(self, wait: bool = True) -> None:
        """Arrete le scheduler."""
        if not self._running:
            return

        self._scheduler.shutdown(wait=wait)
        self._running = False

        logger.info("backup_scheduler_stopped")

    @property
    def is_running(self) -> bool:
        """Retourne True si le scheduler est actif."""
        return self._running

    @property
    def interval_hours(self) -> Optional[float]:
        """Intervalle courant, None si non planifie."""
        return self._interval_hours

    @property
    def next_run(self):
        """Retourne la prochaine execution planifiee."""
        if not self._running:
            return None

        job = self._scheduler.get_job(self.JOB_ID)
        if job:
            return job.next_run_time
        return None

    def _emit(self, event: str, data: dict[str, Any]) -> None:
        """Relaie un evenement au callback, sans jamais lever."""
        if self._on_event is None:
            return
        try:
            self._on_event(event, data)
        except Exception as e:
            logger.error("backup_event_listener_failed", event=event, error=str(e))


def start_backup_scheduler(
    settings: Optional[BackupSettings] = None,
    service: Optional[BackupService] = None,
    on_event: Optional[EventListener] = None,
) -> Optional[BackupScheduler]:
    """
    Demarre les sauvegardes automatiques en production.

    Args:
        settings: Configuration (defaut: variables d'environnement).
        service: Service de sauvegarde (defaut: construit depuis settings).
        on_event: Callback de notification.

    Returns:
        Le scheduler demarre, ou None hors production.
    """
    settings = settings or (service.settings if service else get_backup_settings())

    if not settings.is_production:
        logger.info("backup_scheduler_disabled", environment=settings.environment)
        return None

    service = service or BackupService(settings)
    return BackupScheduler(service, on_event=on_event).schedule(settings.backup_interval_hours)
