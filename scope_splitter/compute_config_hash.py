"""Logic for computing stable hashes of tokenizer configurations."""

import hashlib
import json
from typing import Any

from scope_splitter.load_config import DEFAULT_CONFIG


def compute_config_hash(config: dict[str, Any]) -> str:
    """Compute a stable hash over the settings that affect splitting.

    Unknown keys are ignored; the rest is hashed as canonical JSON (sorted keys).
    """
    relevant = {key: config.get(key) for key in DEFAULT_CONFIG}
    config_json = json.dumps(relevant, sort_keys=True, ensure_ascii=True)
    return hashlib.sha256(config_json.encode("utf-8")).hexdigest()
