"""Policy for empty top-level segments."""

from enum import Enum


class SplitOptions(Enum):
    """Controls whether segments that trim to empty are kept."""

    KEEP_EMPTY = "keep_empty"
    REMOVE_EMPTY = "remove_empty"
