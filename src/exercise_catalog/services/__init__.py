"""Catalog maintenance services."""

from .activate import (
    ActivationResult,
    ActivationStatus,
    ActivationSummary,
    activate_exercises,
    activate_one,
)
from .populate import (
    BatchResult,
    PopulateSummary,
    chunk_rows,
    filter_new_rows,
    insert_in_batches,
    to_row,
)

__all__ = [
    "activate_exercises",
    "activate_one",
    "ActivationResult",
    "ActivationStatus",
    "ActivationSummary",
    "BatchResult",
    "chunk_rows",
    "filter_new_rows",
    "insert_in_batches",
    "PopulateSummary",
    "to_row",
]
