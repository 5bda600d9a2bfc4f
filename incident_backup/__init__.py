"""
Incident Backup - Sauvegarde et restauration de la plateforme d'incidents.

Structure:
    - domain/: Artefacts de sauvegarde et exceptions metier
    - application/: Ports (interfaces) vers les capacites externes
    - infrastructure/: Adapters (pg_dump/psql, tar, APScheduler, structlog)
"""

__version__ = "1.0.0"
