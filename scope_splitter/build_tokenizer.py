"""Logic for building a tokenizer from a configuration dictionary."""

from typing import Any

from scope_splitter.delimiter import Delimiter
from scope_splitter.split_options import SplitOptions
from scope_splitter.tokenizer import Tokenizer

SHORTHAND_WITH_SEPARATOR = 3
SHORTHAND_WITHOUT_SEPARATOR = 2


def parse_delimiter(entry: Any) -> Delimiter:
    """Parse one delimiter entry.

    Accepts a mapping with 'start', 'end' and an optional 'separator', or a
    shorthand string: "[,]" is start/separator/end, '""' is start/end only.
    """
    if isinstance(entry, str):
        if len(entry) == SHORTHAND_WITH_SEPARATOR:
            return Delimiter(entry[0], entry[1], entry[2])
        if len(entry) == SHORTHAND_WITHOUT_SEPARATOR:
            return Delimiter(entry[0], "", entry[1])
        msg = f"Delimiter shorthand must have 2 or 3 characters: {entry!r}"
        raise ValueError(msg)

    if not isinstance(entry, dict):
        msg = f"Delimiter must be a mapping or a string: {entry!r}"
        raise ValueError(msg)

    start = entry.get("start")
    end = entry.get("end")
    separator = entry.get("separator") or ""
    for name, char in (("start", start), ("end", end)):
        if not isinstance(char, str) or len(char) != 1:
            msg = f"Delimiter '{name}' must be a single character: {entry!r}"
            raise ValueError(msg)
    if not isinstance(separator, str) or len(separator) > 1:
        msg = f"Delimiter 'separator' must be a single character: {entry!r}"
        raise ValueError(msg)
    return Delimiter(start, separator, end)


def _parse_escape_characters(values: list[Any]) -> list[str]:
    escapes = []
    for value in values:
        if not isinstance(value, str) or len(value) != 1:
            msg = f"Escape character must be a single character: {value!r}"
            raise ValueError(msg)
        escapes.append(value)
    return escapes


def build_tokenizer(config: dict[str, Any]) -> Tokenizer:
    """Create a tokenizer from the delimiter sections of a configuration."""
    return Tokenizer(
        array_delimiters=[
            parse_delimiter(e) for e in config.get("array_delimiters") or []
        ],
        object_delimiters=[
            parse_delimiter(e) for e in config.get("object_delimiters") or []
        ],
        non_parsable_data_delimiters=[
            parse_delimiter(e)
            for e in config.get("non_parsable_data_delimiters") or []
        ],
        escape_characters=_parse_escape_characters(
            config.get("escape_characters") or []
        ),
    )


def split_options_from_config(config: dict[str, Any]) -> SplitOptions:
    """Map the 'remove_empty_entries' flag to a split policy."""
    if config.get("remove_empty_entries"):
        return SplitOptions.REMOVE_EMPTY
    return SplitOptions.KEEP_EMPTY
