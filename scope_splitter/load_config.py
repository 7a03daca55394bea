"""Logic for loading and merging configuration files."""

import logging
from pathlib import Path
from typing import Any

import yaml

from scope_splitter.deep_merge import deep_merge

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "array_delimiters": [],
    "object_delimiters": [],
    "non_parsable_data_delimiters": [],
    "escape_characters": [],
    "remove_empty_entries": False,
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = DEFAULT_CONFIG.copy()
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            if not isinstance(user_config, dict):
                msg = f"Configuration root must be a mapping: {p}"
                raise ValueError(msg)
            config = deep_merge(config, user_config)
        else:
            logger.warning("Configuration file not found: %s. Using defaults.", p)
    return config
