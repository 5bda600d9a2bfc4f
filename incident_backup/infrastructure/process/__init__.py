"""
Process Infrastructure - Execution des commandes externes.
"""

from incident_backup.infrastructure.process.subprocess_runner import SubprocessCommandRunner

__all__ = ["SubprocessCommandRunner"]
