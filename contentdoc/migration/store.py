"""JSON record file reading and writing."""

from __future__ import annotations

import json
import logging
import shutil
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


def load_records(path: str | Path) -> dict[str, Any]:
    """Read a record file: a JSON object mapping collection names to record lists."""
    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(raw, dict):
        raise ValueError(
            f"Invalid record file {path}: expected an object of collections, "
            f"got {type(raw).__name__}"
        )
    return raw


def save_records(path: str | Path, records: dict[str, Any], backup: bool = True) -> Path | None:
    """Write records, first copying an existing file to ``<name>.bak``.

    Returns the backup path, or None when no backup was made.
    """
    path = Path(path)
    backup_path = None
    if backup and path.is_file():
        backup_path = path.with_name(f"{path.name}.bak")
        shutil.copy2(path, backup_path)
        logger.info("Backed up %s to %s", path, backup_path)

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(records, indent=2, ensure_ascii=False), encoding="utf-8")
    return backup_path
