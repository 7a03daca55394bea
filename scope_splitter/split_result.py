"""Data model for the outcome of a split."""

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

from scope_splitter.split_type import SplitType


@dataclass
class SplitResult:
    """Trimmed top-level substrings plus the recognized classification."""

    split_type: SplitType = SplitType.NONE
    items: list[str] = field(default_factory=list)

    @property
    def is_error(self) -> bool:
        """Return True if some opened scope was never closed."""
        return self.split_type is SplitType.ERROR

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[str]:
        return iter(self.items)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable view of the result."""
        return {"split_type": self.split_type.value, "items": list(self.items)}
