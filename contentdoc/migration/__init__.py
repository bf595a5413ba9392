"""Record migration subsystem: legacy text fields to structured documents."""

from contentdoc.migration.migrator import ContentMigrator
from contentdoc.migration.models import CollectionStats, MigrationError, MigrationReport
from contentdoc.migration.store import load_records, save_records

__all__ = [
    "CollectionStats",
    "ContentMigrator",
    "MigrationError",
    "MigrationReport",
    "load_records",
    "save_records",
]
