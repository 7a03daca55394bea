"""Logic for layering a user configuration over the defaults."""

from collections.abc import Collection
from typing import Any

# Sections whose entries accumulate across layers instead of being replaced
ACCUMULATED_SECTIONS = frozenset({"escape_characters"})


def deep_merge(
    base: dict[str, Any],
    update: dict[str, Any],
    accumulated: Collection[str] = ACCUMULATED_SECTIONS,
) -> dict[str, Any]:
    """Return `base` overlaid with `update`, leaving both inputs untouched.

    Nested mappings are overlaid section by section. Delimiter lists are
    replaced wholesale because their order is their match priority. Sections
    named in `accumulated` keep every distinct entry of both layers, base
    entries first.
    """
    merged = dict(base)
    for section, value in update.items():
        current = merged.get(section)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[section] = deep_merge(current, value, accumulated)
        elif section in accumulated and isinstance(current, list):
            entries = value if isinstance(value, list) else [value]
            merged[section] = list(dict.fromkeys([*current, *entries]))
        else:
            merged[section] = value
    return merged
