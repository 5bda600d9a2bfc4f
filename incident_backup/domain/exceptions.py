"""
Exceptions du domaine des sauvegardes.

Taxonomie:
----------
- ConfigurationError: information de connexion requise absente.
- ProcessExecutionError: une commande externe n'a pas demarre ou a
  termine avec un code non nul.
- StorageEnumerationError / StorageDeletionError: echec de listing ou de
  suppression dans le Backup Store (jamais propages au-dela du listing
  ou de la retention).
"""

from pathlib import Path
from typing import Optional, Sequence


class BackupError(Exception):
    """Exception de base pour toutes les erreurs de sauvegarde."""

    def __init__(self, message: str, code: str | None = None) -> None:
        """
        Initialise une exception de sauvegarde.

        Args:
            message: Message d'erreur descriptif.
            code: Code d'erreur optionnel pour identification programmatique.
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ConfigurationError(BackupError):
    """Leve quand un parametre requis n'est pas configure."""

    def __init__(self, setting: str) -> None:
        super().__init__(
            f"{setting} non configure",
            code="CONFIGURATION_ERROR"
        )
        self.setting = setting


class ProcessExecutionError(BackupError):
    """Leve quand une commande externe echoue ou ne peut pas demarrer."""

    def __init__(
        self,
        command: Sequence[str],
        returncode: Optional[int] = None,
        stderr: str = "",
        reason: str | None = None,
    ) -> None:
        program = command[0] if command else "?"
        if returncode is None:
            message = f"Impossible de lancer '{program}'"
        else:
            message = f"'{program}' a echoue (code {returncode})"
        detail = reason or stderr.strip()
        if detail:
            message += f": {detail}"
        super().__init__(message, code="PROCESS_EXECUTION_ERROR")
        self.command = list(command)
        self.returncode = returncode
        self.stderr = stderr


class StorageEnumerationError(BackupError):
    """Leve quand le Backup Store ne peut pas etre liste."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(
            f"Listing impossible de '{path}': {reason}",
            code="STORAGE_ENUMERATION_ERROR"
        )
        self.path = path


class StorageDeletionError(BackupError):
    """Leve quand un artefact ne peut pas etre supprime."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(
            f"Suppression impossible de '{path}': {reason}",
            code="STORAGE_DELETION_ERROR"
        )
        self.path = path
