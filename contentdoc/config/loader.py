"""YAML config loading with env var expansion."""

import os
import re
from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import ContentDocConfig

_ENV_VAR_RE = re.compile(r"\$\{(\w+)\}")


def _search_paths() -> list[Path]:
    return [Path("./contentdoc.yaml"), Path.home() / ".contentdoc" / "config.yaml"]


def load_config(cli_path: str | None = None) -> ContentDocConfig:
    """Load the contentdoc config.

    An explicit ``cli_path`` is the only file consulted and must exist. Without
    one, the first of ./contentdoc.yaml and ~/.contentdoc/config.yaml that exists
    is used, falling back to defaults.
    """
    if cli_path:
        path = Path(cli_path)
        if not path.is_file():
            raise ValueError(f"Config file not found: {path}")
        return _read_config(path)

    for path in _search_paths():
        if path.exists():
            return _read_config(path)
    return ContentDocConfig()


def _read_config(path: Path) -> ContentDocConfig:
    try:
        with open(path) as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e

    # An empty file means defaults.
    if raw is None:
        return ContentDocConfig()
    if not isinstance(raw, dict):
        raise ValueError(f"Invalid config in {path}: expected a mapping, got {type(raw).__name__}")
    try:
        return ContentDocConfig(**_expand_env_vars(raw))
    except ValidationError as e:
        raise ValueError(f"Invalid config in {path}: {e}") from e


def _expand_env_vars(obj: object) -> object:
    """Expand ${VAR} references in every string of a parsed YAML tree. Unset vars become ""."""
    if isinstance(obj, dict):
        return {key: _expand_env_vars(value) for key, value in obj.items()}
    if isinstance(obj, list):
        return [_expand_env_vars(item) for item in obj]
    if isinstance(obj, str):
        return _ENV_VAR_RE.sub(lambda m: os.environ.get(m.group(1), ""), obj)
    return obj


# Default YAML template for `contentdoc config init`
DEFAULT_CONFIG_TEMPLATE = """\
# contentdoc.yaml

# Converter used when no --format is given
converter:
  default_format: "auto"       # auto | plain | markdown

# Preview snippets
preview:
  max_chars: 200
  ellipsis: "..."

# Record migration
migration:
  backup: true                 # copy the record file to <name>.bak before overwriting
  collections:
    - name: "courses"
      id_field: "id"
      fields:
        - name: "description"
          format: "auto"
        - name: "shortDescription"
          format: "plain"
    - name: "sections"
      fields:
        - name: "description"
    - name: "lessons"
      fields:
        - name: "content"
          only_when:
            type: "ARTICLE"
        - name: "description"

# Logging
log_level: "info"              # debug | info | warn | error
log_format: "text"             # text | json
"""
