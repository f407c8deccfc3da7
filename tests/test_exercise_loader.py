"""Tests for the catalog JSON loader."""

import json
from pathlib import Path

import pytest

from exercise_catalog.data.exercise_loader import (
    ExerciseFileError,
    ExerciseFileParseError,
    ExerciseFileReadError,
    get_exercises_json_path,
    load_exercises,
)


class TestLoadExercises:
    """Tests for load_exercises."""

    def test_loads_in_file_order(self, catalog_file):
        """Test loading a valid catalog."""
        exercises = load_exercises(catalog_file)

        assert [e.exercise_id for e in exercises] == ["e1", "e2", "e3"]
        assert exercises[2].target_muscles == ["quads"]

    def test_empty_array(self, tmp_path):
        """Test that an empty catalog loads as an empty list."""
        path = tmp_path / "exercises.json"
        path.write_text("[]", encoding="utf-8")

        assert load_exercises(path) == []

    def test_missing_file(self, tmp_path):
        """Test that a missing file raises a read error."""
        with pytest.raises(ExerciseFileReadError) as exc_info:
            load_exercises(tmp_path / "nope.json")

        assert isinstance(exc_info.value, ExerciseFileError)
        assert exc_info.value.path == tmp_path / "nope.json"

    def test_malformed_json(self, tmp_path):
        """Test that invalid JSON raises a parse error."""
        path = tmp_path / "exercises.json"
        path.write_text('[{"exerciseId": "e1",', encoding="utf-8")

        with pytest.raises(ExerciseFileParseError):
            load_exercises(path)

    def test_not_an_array(self, tmp_path):
        """Test that a top-level object is rejected."""
        path = tmp_path / "exercises.json"
        path.write_text(json.dumps({"exercises": []}), encoding="utf-8")

        with pytest.raises(ExerciseFileParseError, match="array"):
            load_exercises(path)

    def test_entry_missing_id(self, tmp_path):
        """Test that an entry without exerciseId is rejected."""
        path = tmp_path / "exercises.json"
        path.write_text(json.dumps([{"name": "Push Up"}]), encoding="utf-8")

        with pytest.raises(ExerciseFileParseError, match="exerciseId"):
            load_exercises(path)

    def test_invalid_utf8(self, tmp_path):
        """Test that undecodable bytes raise a parse error."""
        path = tmp_path / "exercises.json"
        path.write_bytes(b'[{"exerciseId": "e1", "name": "Push \xff Up"}]')

        with pytest.raises(ExerciseFileParseError, match="UTF-8"):
            load_exercises(path)

    def test_string_instead_of_list(self, tmp_path):
        """Test that a bare string list attribute is rejected, not split."""
        path = tmp_path / "exercises.json"
        path.write_text(
            json.dumps([{"exerciseId": "e1", "name": "Push Up", "targetMuscles": "chest"}]),
            encoding="utf-8",
        )

        with pytest.raises(ExerciseFileParseError, match="targetMuscles"):
            load_exercises(path)

    def test_non_string_list_items(self, tmp_path):
        """Test that list attributes must hold strings."""
        path = tmp_path / "exercises.json"
        path.write_text(
            json.dumps([{"exerciseId": "e1", "name": "Push Up", "instructions": [1, 2]}]),
            encoding="utf-8",
        )

        with pytest.raises(ExerciseFileParseError, match="instructions"):
            load_exercises(path)

    @pytest.mark.parametrize("entry", [
        {"exerciseId": 1, "name": "Push Up"},
        {"exerciseId": "e1", "name": None},
    ])
    def test_non_string_id_or_name(self, tmp_path, entry):
        """Test that exerciseId and name must be strings."""
        path = tmp_path / "exercises.json"
        path.write_text(json.dumps([entry]), encoding="utf-8")

        with pytest.raises(ExerciseFileParseError, match="must be a string"):
            load_exercises(path)

    def test_entry_not_an_object(self, tmp_path):
        """Test that non-object entries are rejected."""
        path = tmp_path / "exercises.json"
        path.write_text(json.dumps(["Push Up"]), encoding="utf-8")

        with pytest.raises(ExerciseFileParseError, match="entry 0"):
            load_exercises(path)


def test_default_path_is_relative_to_cwd(tmp_path, monkeypatch):
    """Test the default catalog location."""
    monkeypatch.chdir(tmp_path)
    assert get_exercises_json_path() == Path.cwd() / "src" / "data" / "exercises.json"
