"""
RetentionEnforcer - Politique de retention des sauvegardes.

Responsabilite unique:
----------------------
Ne conserver que les N artefacts les plus recents du Backup Store.

Portees:
--------
- combined: le plafond s'applique au total dump SQL + archives
  (une serie de dumps peut evincer les archives plus anciennes).
- per_kind: le plafond s'applique a chaque type separement.
"""

from collections import defaultdict

from incident_backup.domain.entities.backup_artifact import ArtifactKind
from incident_backup.domain.exceptions import BackupError
from incident_backup.infrastructure.backup.store import BackupStore
from incident_backup.infrastructure.logging import get_logger

logger = get_logger(__name__)


class RetentionEnforcer:
    """
    Supprime les artefacts les plus anciens au-dela du plafond.

    Une passe qui echoue est abandonnee: les artefacts restants en exces
    seront traites par la passe suivante.
    """

    def __init__(self, store: BackupStore, max_backups: int, scope: str = "combined"):
        """
        Initialise la politique.

        Args:
            store: Backup Store a nettoyer.
            max_backups: Nombre maximum d'artefacts conserves.
            scope: "combined" ou "per_kind".
        """
        self._store = store
        self._max_backups = max_backups
        self._scope = scope

    def enforce(self) -> int:
        """
        Execute une passe de retention.

        Ne leve jamais.

        Returns:
            Nombre d'artefacts supprimes pendant la passe.
        """
        deleted = 0
        try:
            names = self._store.list_backups()
            newest_first = sorted(names, key=self._store.modified_time, reverse=True)

            for name in self._select_excess(newest_first):
                self._store.delete(name)
                deleted += 1
                logger.info("old_backup_deleted", backup=name)

        except (OSError, BackupError) as e:
            logger.error(
                "backup_cleanup_failed",
                error=str(e),
                deleted=deleted,
            )

        return deleted

    def _select_excess(self, newest_first: list[str]) -> list[str]:
        """Artefacts a supprimer, du plus recent au plus ancien."""
        if self._scope != "per_kind":
            return newest_first[self._max_backups:]

        kept: dict[ArtifactKind, int] = defaultdict(int)
        excess = []
        for name in newest_first:
            kind = ArtifactKind.DATABASE if name.endswith(".sql") else ArtifactKind.FILES
            kept[kind] += 1
            if kept[kind] > self._max_backups:
                excess.append(name)
        return excess
