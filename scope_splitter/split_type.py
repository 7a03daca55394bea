"""Classification of the structure recognized by a split."""

from enum import Enum


class SplitType(Enum):
    """Shape of the input as recognized by the tokenizer."""

    NONE = "none"
    ARRAY = "array"
    OBJECT = "object"
    ERROR = "error"
