"""Populate the exercises table from the catalog file."""

import asyncio
from collections.abc import AsyncIterator, Iterable
from dataclasses import dataclass

from ..db.repositories import ExerciseStore
from ..models.exercises import ExerciseRow, SourceExercise

DEFAULT_BATCH_SIZE = 100
DEFAULT_BATCH_DELAY = 0.1  # seconds between insert calls


@dataclass
class BatchResult:
    """Outcome of a single insert call."""

    number: int  # 1-based
    size: int
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class PopulateSummary:
    """Aggregate counts for a populate run."""

    total: int = 0
    skipped: int = 0
    inserted: int = 0
    failed: int = 0
    batches: int = 0
    failed_batches: int = 0

    def add(self, result: BatchResult) -> None:
        """Fold a batch result into the counts."""
        self.batches += 1
        if result.ok:
            self.inserted += result.size
        else:
            self.failed += result.size
            self.failed_batches += 1


def to_row(exercise: SourceExercise) -> ExerciseRow:
    """Map a source exercise to a new, inactive table row."""
    return ExerciseRow.from_source(exercise)


def filter_new_rows(rows: Iterable[ExerciseRow], existing_ids: set[str]) -> list[ExerciseRow]:
    """Drop rows whose exercise_id is already stored."""
    return [row for row in rows if row.exercise_id not in existing_ids]


def chunk_rows(rows: list[ExerciseRow], batch_size: int) -> list[list[ExerciseRow]]:
    """Split rows into consecutive chunks of at most batch_size."""
    if batch_size < 1:
        raise ValueError("batch_size must be at least 1")
    return [rows[i : i + batch_size] for i in range(0, len(rows), batch_size)]


async def insert_in_batches(
    store: ExerciseStore,
    rows: list[ExerciseRow],
    batch_size: int = DEFAULT_BATCH_SIZE,
    delay: float = DEFAULT_BATCH_DELAY,
) -> AsyncIterator[BatchResult]:
    """Insert rows one chunk at a time, yielding a result per chunk.

    A failed chunk is reported and the next chunk is still attempted;
    failed chunks are not retried. A fixed pause follows every insert call.
    """
    for number, batch in enumerate(chunk_rows(rows, batch_size), start=1):
        try:
            await store.insert_batch(batch)
        except Exception as e:
            yield BatchResult(number=number, size=len(batch), error=str(e))
        else:
            yield BatchResult(number=number, size=len(batch))

        await asyncio.sleep(delay)
