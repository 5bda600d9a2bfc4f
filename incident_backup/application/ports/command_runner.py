"""
Interface d'execution de commandes externes.

Les capacites dump (pg_dump), restore (psql), archive et extract (tar)
sont invoquees a travers ce port, ce qui permet aux tests de substituer
des implementations deterministes aux vrais outils.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from pathlib import Path
from typing import Optional


class CommandRunner(ABC):
    """
    Interface pour l'execution d'une commande externe.

    Contrat: la commande termine avec le code 0, sinon
    ProcessExecutionError est levee (code non nul ou demarrage impossible).
    """

    @abstractmethod
    def run(
        self,
        args: Sequence[str],
        *,
        stdin: Optional[Path] = None,
        stdout: Optional[Path] = None,
        cwd: Optional[Path] = None,
    ) -> None:
        """
        Execute une commande et attend sa fin.

        Args:
            args: Programme et arguments.
            stdin: Fichier dont le contenu est envoye sur l'entree standard.
            stdout: Fichier recevant la sortie standard (cree ou ecrase).
            cwd: Repertoire de travail (defaut: repertoire courant).

        Raises:
            ProcessExecutionError: Code de sortie non nul ou demarrage impossible.
        """
        pass
