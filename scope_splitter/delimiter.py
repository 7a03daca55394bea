"""Data models for nested-scope delimiters."""

from dataclasses import dataclass
from enum import Enum


class DelimiterKind(Enum):
    """Dialect a delimiter belongs to, listed in match priority order."""

    ARRAY = "array"
    OBJECT = "object"
    NON_PARSABLE = "non_parsable"


@dataclass(frozen=True)
class Delimiter:
    """Start, separator and end characters of one scope, e.g. `[`, `,`, `]`."""

    start: str
    separator: str  # "" when the scope has no separator
    end: str
