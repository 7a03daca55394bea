"""Logic for generating reports on batches of split inputs."""

import json
import logging
import time
from pathlib import Path
from typing import Any

from scope_splitter.split_result import SplitResult
from scope_splitter.split_type import SplitType

logger = logging.getLogger(__name__)


class SplitReport:
    """Collects and summarizes the results of splitting many inputs."""

    def __init__(self, config_hash: str) -> None:
        """Initialize the report with the hash of the configuration in use."""
        self.config_hash = config_hash
        self.entries: list[tuple[str, SplitResult]] = []
        self.start_time = time.time()

    def add_result(self, source: str, result: SplitResult) -> None:
        """Add the result of splitting a single input to the report."""
        self.entries.append((source, result))

    def generate_report(self, path: str) -> None:
        """Write the summary report to a JSON file."""
        report = {
            "meta": {
                "timestamp": time.time(),
                "duration": time.time() - self.start_time,
                "config_hash": self.config_hash,
                "total_items": len(self.entries),
            },
            "results": [
                {"source": source, **result.to_dict()}
                for source, result in self.entries
            ],
            "stats": self._compute_stats(),
        }

        Path(path).write_text(json.dumps(report, indent=2), encoding="utf-8")
        logger.info("Wrote split report for %s inputs to %s", len(self.entries), path)

    def _compute_stats(self) -> dict[str, Any]:
        split_type_counts = {t.value: 0 for t in SplitType}
        total_segments = 0
        for _, result in self.entries:
            split_type_counts[result.split_type.value] += 1
            total_segments += len(result)

        return {
            "split_type_counts": split_type_counts,
            "error_count": split_type_counts[SplitType.ERROR.value],
            "total_segments": total_segments,
        }
