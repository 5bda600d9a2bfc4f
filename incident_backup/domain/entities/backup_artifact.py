"""
BackupArtifact Entity - Artefact de sauvegarde.

Responsabilite unique:
----------------------
Representer un fichier de sauvegarde (dump SQL ou archive des uploads)
et l'encodage de son horodatage dans le nom de fichier.

Format des noms:
----------------
- database-<timestamp>.sql
- files-<timestamp>.tar.gz

Le timestamp est un ISO-8601 UTC a la milliseconde dont les caracteres
':' et '.' sont remplaces par '-' (ex: 2024-01-15T10-30-00-123Z).
"""

import re
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Optional


class ArtifactKind(Enum):
    """Types d'artefacts geres."""

    DATABASE = "database-snapshot"
    FILES = "file-archive"

    @property
    def prefix(self) -> str:
        """Prefixe du nom de fichier."""
        return "database" if self is ArtifactKind.DATABASE else "files"

    @property
    def extension(self) -> str:
        """Extension du nom de fichier."""
        return ".sql" if self is ArtifactKind.DATABASE else ".tar.gz"

    def filename(self, timestamp: str) -> str:
        """Construit le nom de fichier pour un timestamp donne."""
        return f"{self.prefix}-{timestamp}{self.extension}"


BACKUP_EXTENSIONS = tuple(kind.extension for kind in ArtifactKind)

_TIMESTAMP_PATTERN = re.compile(
    r"(?P<date>\d{4}-\d{2}-\d{2})T(?P<h>\d{2})-(?P<m>\d{2})-(?P<s>\d{2})-(?P<ms>\d{3})Z"
)
_NAME_PATTERN = re.compile(
    r"^(?P<prefix>database|files)-(?P<ts>.+?)(?P<ext>\.sql|\.tar\.gz)$"
)


def make_timestamp(now: Optional[datetime] = None) -> str:
    """
    Genere un timestamp ISO-8601 compatible avec les noms de fichiers.

    Args:
        now: Instant a encoder (defaut: maintenant, UTC).

    Returns:
        Timestamp de la forme 2024-01-15T10-30-00-123Z.
    """
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is not None:
        now = now.astimezone(timezone.utc)
    iso = now.strftime("%Y-%m-%dT%H:%M:%S") + f".{now.microsecond // 1000:03d}Z"
    return iso.replace(":", "-").replace(".", "-")


def parse_timestamp(timestamp: str) -> Optional[datetime]:
    """Decode un timestamp de nom de fichier, None si non reconnu."""
    match = _TIMESTAMP_PATTERN.fullmatch(timestamp)
    if not match:
        return None
    return datetime.strptime(
        f"{match['date']} {match['h']}:{match['m']}:{match['s']}.{match['ms']}",
        "%Y-%m-%d %H:%M:%S.%f",
    ).replace(tzinfo=timezone.utc)


def is_backup_name(name: str) -> bool:
    """True si le nom suit une convention d'extension de sauvegarde."""
    return name.endswith(BACKUP_EXTENSIONS)


@dataclass(frozen=True)
class BackupArtifact:
    """
    Entite BackupArtifact.

    Immuable une fois ecrit: un artefact est lu (restauration, listing)
    ou supprime (retention), jamais modifie.

    Attributes:
        kind: Type d'artefact.
        path: Emplacement dans le Backup Store.
        created_at: Horodatage encode dans le nom (None si illisible).
    """

    kind: ArtifactKind
    path: Path
    created_at: Optional[datetime] = None

    @property
    def name(self) -> str:
        """Nom du fichier."""
        return self.path.name

    @property
    def modified_at(self) -> datetime:
        """Date de derniere modification observee sur le disque."""
        return datetime.fromtimestamp(self.path.stat().st_mtime, tz=timezone.utc)

    @classmethod
    def from_path(cls, path: Path) -> Optional["BackupArtifact"]:
        """
        Reconnait un artefact a partir de son chemin.

        Les noms termines par .sql ou .tar.gz sans prefixe connu sont
        classes selon leur extension.

        Returns:
            BackupArtifact, ou None si l'extension n'est pas reconnue.
        """
        path = Path(path)
        name = path.name
        if not is_backup_name(name):
            return None

        kind = ArtifactKind.DATABASE if name.endswith(".sql") else ArtifactKind.FILES
        created_at = None
        match = _NAME_PATTERN.match(name)
        if match:
            created_at = parse_timestamp(match["ts"])

        return cls(kind=kind, path=path, created_at=created_at)


@dataclass(frozen=True)
class FullBackupResult:
    """
    Resultat d'une sauvegarde complete.

    Attributes:
        database_path: Dump SQL produit.
        files_path: Archive des uploads produite.
    """

    database_path: Path
    files_path: Path
