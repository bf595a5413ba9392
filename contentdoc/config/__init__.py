from .loader import load_config
from .models import (
    CollectionRule,
    ContentDocConfig,
    ConverterSettings,
    FieldRule,
    MigrationConfig,
    PreviewConfig,
)

__all__ = [
    "CollectionRule",
    "ContentDocConfig",
    "ConverterSettings",
    "FieldRule",
    "MigrationConfig",
    "PreviewConfig",
    "load_config",
]
