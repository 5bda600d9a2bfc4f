"""
Infrastructure Layer - Adapters pour les services externes.

Cette couche contient les implementations concretes des ports definis
dans la couche application. Elle gere les interactions avec:
- PostgreSQL (pg_dump / psql)
- Le systeme de fichiers (Backup Store, archives tar)
- APScheduler (planification)
- structlog (journalisation)
"""
