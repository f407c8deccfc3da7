"""Activate a curated set of exercises by name."""

from collections.abc import AsyncIterator, Iterable
from dataclasses import dataclass, field
from enum import Enum

from ..db.repositories import ExerciseStore
from ..models.exercises import StoredExercise


class ActivationStatus(str, Enum):
    """What happened for one name in the activation list."""

    ACTIVATED = "activated"
    NOT_FOUND = "not_found"
    SEARCH_FAILED = "search_failed"
    UPDATE_FAILED = "update_failed"


@dataclass
class ActivationResult:
    """Outcome of searching for and activating one exercise name."""

    name: str
    status: ActivationStatus
    exercise: StoredExercise | None = None
    error: str | None = None


@dataclass
class ActivationSummary:
    """Aggregate counts for an activation run."""

    activated: list[StoredExercise] = field(default_factory=list)
    not_found: list[str] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)

    def add(self, result: ActivationResult) -> None:
        """Fold an activation result into the summary."""
        if result.status == ActivationStatus.ACTIVATED:
            self.activated.append(result.exercise)
        elif result.status == ActivationStatus.NOT_FOUND:
            self.not_found.append(result.name)
        else:
            self.failed.append(result.name)


async def activate_one(store: ExerciseStore, name: str) -> ActivationResult:
    """Activate the first inactive exercise whose name contains name.

    Names are matched as case-insensitive substrings. When several inactive
    exercises match, the first one in the store's default order is chosen;
    that order is not guaranteed to be stable between runs.
    """
    try:
        matches = await store.find_inactive_by_name_substring(name)
    except Exception as e:
        return ActivationResult(name, ActivationStatus.SEARCH_FAILED, error=str(e))

    if not matches:
        return ActivationResult(name, ActivationStatus.NOT_FOUND)

    exercise = matches[0]
    try:
        await store.activate_by_id(exercise.id)
    except Exception as e:
        return ActivationResult(
            name, ActivationStatus.UPDATE_FAILED, exercise=exercise, error=str(e)
        )
    return ActivationResult(name, ActivationStatus.ACTIVATED, exercise=exercise)


async def activate_exercises(
    store: ExerciseStore,
    names: Iterable[str],
) -> AsyncIterator[ActivationResult]:
    """Run activate_one for each name in order, yielding every result."""
    for name in names:
        yield await activate_one(store, name)
