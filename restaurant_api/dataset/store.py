from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .records import Restaurant

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Dataset:
    """Ordered, read-only snapshot of restaurant records."""

    records: tuple[Restaurant, ...] = ()

    @classmethod
    def from_records(cls, records: Iterable[Restaurant]) -> Dataset:
        return cls(records=tuple(records))

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[Restaurant]:
        return iter(self.records)


EMPTY_DATASET = Dataset()


def _parse(raw: Any, path: Path) -> Dataset:
    if not isinstance(raw, list):
        logger.error(
            "Expected a JSON array in %s, got %s", path, type(raw).__name__
        )
        return EMPTY_DATASET

    records = [item for item in raw if isinstance(item, dict)]
    skipped = len(raw) - len(records)
    if skipped:
        logger.warning("Skipped %d non-object entries in %s", skipped, path)
    return Dataset.from_records(records)


def load_dataset(path: Path | str) -> Dataset:
    """
    Read the restaurant collection from a JSON file.

    Never raises: a missing file, unreadable content or an unexpected
    top-level shape all yield the empty dataset.
    """
    path = Path(path)
    try:
        with path.open(encoding="utf-8") as fh:
            raw = json.load(fh)
    except (OSError, ValueError):
        logger.error("Error loading restaurant data from %s", path, exc_info=True)
        return EMPTY_DATASET

    dataset = _parse(raw, path)
    logger.info("Loaded %d restaurants", len(dataset))
    if not dataset:
        logger.warning("Restaurant data is empty.")
    return dataset
