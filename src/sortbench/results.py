# Copyright (c) Syntropy Systems
"""Collection and persistence of trial records."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sortbench.models.results import TRIAL_RECORDS_ADAPTER, TrialRecord

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


class ResultAggregator:
    """Accumulates trial records in order and writes them as a JSON list.

    ``output_path`` may be None for in-memory runs; ``save()`` is then a
    no-op.
    """

    output_path: Path | None
    _records: list[TrialRecord]

    def __init__(self, output_path: Path | None = None) -> None:
        self.output_path = output_path
        self._records = []

    def add(self, record: TrialRecord) -> None:
        """Append a trial record."""
        self._records.append(record)

    def clear(self) -> None:
        """Drop all collected records."""
        self._records.clear()

    @property
    def records(self) -> list[TrialRecord]:
        """Records collected so far, in insertion order."""
        return list(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def save(self) -> Path | None:
        """Write all records to ``output_path``.

        A write failure is logged and leaves the in-memory records untouched.

        Returns:
            The resolved path written, or None if nothing was written.

        """
        if self.output_path is None:
            return None

        try:
            self.output_path.parent.mkdir(parents=True, exist_ok=True)
            _ = self.output_path.write_bytes(
                TRIAL_RECORDS_ADAPTER.dump_json(self._records, indent=2, by_alias=True)
            )
        except OSError as exc:
            logger.error("Failed to save results to %s: %s", self.output_path, exc)  # noqa: TRY400
            return None

        resolved = self.output_path.resolve()
        logger.info("Results saved to %s", resolved)
        return resolved


def load_results(path: Path) -> list[TrialRecord]:
    """Read trial records written by ``ResultAggregator.save``."""
    return TRIAL_RECORDS_ADAPTER.validate_json(path.read_bytes())
