"""Batch migration of legacy text fields to structured documents."""

from __future__ import annotations

import copy
import logging
from typing import Any

from contentdoc.config.models import CollectionRule, FieldRule, MigrationConfig
from contentdoc.converter import convert_text, is_likely_markdown
from contentdoc.converter.models import SourceFormat
from contentdoc.extract import is_structured_document
from contentdoc.migration.models import CollectionStats, MigrationError, MigrationReport

logger = logging.getLogger(__name__)


class ContentMigrator:
    """Applies collection rules to a record mapping.

    Fields already holding a structured document are left alone, so running a
    migration twice is harmless. Problems with individual fields are collected
    in the report instead of aborting the run.
    """

    def __init__(self, config: MigrationConfig | None = None) -> None:
        self._config = config or MigrationConfig()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def migrate(self, records: dict[str, Any]) -> MigrationReport:
        """Convert every field needing migration. The input is not modified."""
        return self._run(records, dry_run=False)

    def analyze(self, records: dict[str, Any]) -> MigrationReport:
        """Count fields needing migration without converting anything."""
        return self._run(records, dry_run=True)

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _run(self, records: dict[str, Any], dry_run: bool) -> MigrationReport:
        report = MigrationReport(dry_run=dry_run)
        output = copy.deepcopy(records)

        for rule in self._config.collections:
            rows = output.get(rule.name)
            if rows is None:
                logger.debug("No '%s' collection in records, skipping", rule.name)
                continue
            if not isinstance(rows, list):
                message = f"{rule.name}: expected a list of records, got {type(rows).__name__}"
                logger.warning("%s", message)
                report.errors.append(message)
                continue

            stats = CollectionStats(collection=rule.name)
            for row in rows:
                stats.records += 1
                if not isinstance(row, dict):
                    message = f"{rule.name}: skipping non-object record {row!r}"
                    logger.warning("%s", message)
                    report.errors.append(message)
                    continue
                if self._migrate_row(rule, row, stats, report, dry_run):
                    stats.records_updated += 1
            report.collections.append(stats)

            logger.info(
                "%s %s: %d/%d records",
                "Analyzed" if dry_run else "Migrated",
                rule.name,
                stats.records_updated,
                stats.records,
            )

        if not dry_run:
            report.records = output
        return report

    def _migrate_row(
        self,
        rule: CollectionRule,
        row: dict[str, Any],
        stats: CollectionStats,
        report: MigrationReport,
        dry_run: bool,
    ) -> bool:
        changed = False
        for field_rule in rule.fields:
            try:
                fmt = self._migrate_field(rule, field_rule, row, dry_run)
            except MigrationError as e:
                logger.warning("Migration failed: %s", e)
                report.errors.append(str(e))
                continue
            if fmt is not None:
                stats.count_field(fmt)
                changed = True
        if changed and not dry_run:
            logger.debug("Updated %s %s", rule.name, row.get(rule.id_field))
        return changed

    @staticmethod
    def _migrate_field(
        rule: CollectionRule,
        field_rule: FieldRule,
        row: dict[str, Any],
        dry_run: bool,
    ) -> SourceFormat | None:
        """Convert one field in place. Returns the format used, or None if untouched."""
        value = row.get(field_rule.name)
        if value is None or value == "":
            return None
        if any(row.get(key) != expected for key, expected in field_rule.only_when.items()):
            return None
        if not isinstance(value, str):
            raise MigrationError(
                rule.name,
                row.get(rule.id_field, "?"),
                field_rule.name,
                f"expected text, got {type(value).__name__}",
            )
        if is_structured_document(value):
            return None

        fmt = field_rule.format
        if fmt == "auto":
            fmt = "markdown" if is_likely_markdown(value) else "plain"
        if not dry_run:
            row[field_rule.name] = convert_text(value, fmt).to_json()
        return fmt
