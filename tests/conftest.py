"""Pytest configuration and fixtures."""

import json

import pytest

from exercise_catalog.db.repositories import StoreError
from exercise_catalog.models.exercises import ExerciseRow, StoredExercise


class FakeExerciseStore:
    """In-memory stand-in for the exercises table.

    Rows are kept in insertion order, which is also the order searches
    return them in.
    """

    def __init__(self, rows: list[dict] | None = None):
        self.rows: list[dict] = []
        self.insert_calls: list[list[ExerciseRow]] = []
        self.update_calls: list[int] = []
        self.search_calls: list[str] = []
        self.fail_batches: set[int] = set()
        self.fail_searches: set[str] = set()
        self.fail_updates: set[int] = set()
        self.ping_error: Exception | None = None
        self.list_error: Exception | None = None
        self.count_error: Exception | None = None
        for row in rows or []:
            self._add(row)

    def _add(self, row: dict) -> None:
        self.rows.append({"id": len(self.rows) + 1, "is_active": False, **row})

    async def ping(self) -> None:
        if self.ping_error is not None:
            raise StoreError("connectivity check", self.ping_error)

    async def list_identifiers(self) -> set[str]:
        if self.list_error is not None:
            raise StoreError("listing exercise IDs", self.list_error)
        return {row["exercise_id"] for row in self.rows}

    async def insert_batch(self, rows: list[ExerciseRow]) -> int:
        self.insert_calls.append(list(rows))
        if len(self.insert_calls) in self.fail_batches:
            raise StoreError("inserting", RuntimeError("duplicate key value"))
        for row in rows:
            self._add(row.to_dict())
        return len(rows)

    async def find_inactive_by_name_substring(self, text: str) -> list[StoredExercise]:
        self.search_calls.append(text)
        if text in self.fail_searches:
            raise StoreError(f"searching for {text!r}", RuntimeError("timeout"))
        return [
            StoredExercise.from_dict(row)
            for row in self.rows
            if text.lower() in row["name"].lower() and not row["is_active"]
        ]

    async def activate_by_id(self, id) -> None:
        self.update_calls.append(id)
        if id in self.fail_updates:
            raise StoreError(f"activating exercise {id}", RuntimeError("permission denied"))
        for row in self.rows:
            if row["id"] == id:
                row["is_active"] = True

    async def count_active(self) -> int:
        if self.count_error is not None:
            raise StoreError("counting active exercises", self.count_error)
        return sum(1 for row in self.rows if row["is_active"])

    def inactive_count(self) -> int:
        return sum(1 for row in self.rows if not row["is_active"])


def _make_source(exercise_id: str, name: str, **overrides) -> dict:
    """Build a catalog JSON entry."""
    data = {
        "exerciseId": exercise_id,
        "name": name,
        "gifUrl": f"https://static.example.com/{exercise_id}.gif",
        "targetMuscles": ["chest"],
        "bodyParts": ["chest"],
        "equipments": ["body weight"],
        "secondaryMuscles": ["triceps"],
        "instructions": ["step1"],
    }
    data.update(overrides)
    return data


@pytest.fixture
def make_source():
    """Factory for catalog JSON entries."""
    return _make_source


@pytest.fixture
def fake_store():
    """Create an empty in-memory exercise store."""
    return FakeExerciseStore()


@pytest.fixture
def sample_catalog():
    """A small exercise catalog in the source JSON shape."""
    return [
        _make_source("e1", "Push Up"),
        _make_source("e2", "Barbell Bench Press"),
        _make_source("e3", "Barbell Full Squat", targetMuscles=["quads"]),
    ]


@pytest.fixture
def catalog_file(tmp_path, sample_catalog):
    """Write sample_catalog to a temporary JSON file."""
    path = tmp_path / "exercises.json"
    path.write_text(json.dumps(sample_catalog), encoding="utf-8")
    return path


@pytest.fixture
def catalog_store():
    """A store already holding inactive exercises from a loaded catalog."""
    names = [
        ("0001", "Push Up"),
        ("0002", "Diamond Push Up"),
        ("0003", "Barbell Bench Press"),
        ("0004", "Barbell Full Squat"),
        ("0005", "Front Plank"),
        ("0006", "Dumbbell Hammer Curl"),
    ]
    return FakeExerciseStore(
        [
            {"exercise_id": exercise_id, "name": name, "gif_path": f"gifs/{exercise_id}.gif"}
            for exercise_id, name in names
        ]
    )
