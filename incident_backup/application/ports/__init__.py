"""
Ports (Interfaces) de l'application.

Les ports definissent les contrats que les adapters
de l'infrastructure doivent implementer.
"""

from incident_backup.application.ports.command_runner import CommandRunner

__all__ = ["CommandRunner"]
