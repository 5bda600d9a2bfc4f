"""
SubprocessCommandRunner - Execution de commandes via subprocess.

Responsabilite unique:
----------------------
Lancer un programme externe, rediriger ses flux vers des fichiers
et convertir tout echec en ProcessExecutionError.

Usage:
------
    runner = SubprocessCommandRunner()
    runner.run(["pg_dump", url], stdout=Path("backups/database.sql"))
"""

import subprocess
from collections.abc import Sequence
from contextlib import ExitStack
from pathlib import Path
from typing import Optional

from incident_backup.application.ports.command_runner import CommandRunner
from incident_backup.domain.exceptions import ProcessExecutionError
from incident_backup.infrastructure.logging import get_logger

logger = get_logger(__name__)


class SubprocessCommandRunner(CommandRunner):
    """
    Implementation de CommandRunner basee sur subprocess.

    Aucun timeout: une commande bloquee bloque l'appelant.
    """

    def run(
        self,
        args: Sequence[str],
        *,
        stdin: Optional[Path] = None,
        stdout: Optional[Path] = None,
        cwd: Optional[Path] = None,
    ) -> None:
        """Execute la commande et leve ProcessExecutionError en cas d'echec."""
        args = [str(arg) for arg in args]
        logger.debug("command_started", program=args[0], cwd=str(cwd) if cwd else None)

        with ExitStack() as stack:
            try:
                stdin_handle = stack.enter_context(open(stdin, "rb")) if stdin else None
                stdout_handle = (
                    stack.enter_context(open(stdout, "wb")) if stdout else subprocess.DEVNULL
                )
                completed = subprocess.run(
                    args,
                    stdin=stdin_handle,
                    stdout=stdout_handle,
                    stderr=subprocess.PIPE,
                    cwd=cwd,
                    check=False,
                )
            except OSError as e:
                raise ProcessExecutionError(args, reason=str(e)) from e

        if completed.returncode != 0:
            stderr = completed.stderr.decode(errors="replace") if completed.stderr else ""
            raise ProcessExecutionError(args, returncode=completed.returncode, stderr=stderr)

        logger.debug("command_completed", program=args[0])
