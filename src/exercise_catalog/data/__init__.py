"""Data loading utilities."""

from .exercise_loader import (
    ExerciseFileError,
    ExerciseFileParseError,
    ExerciseFileReadError,
    get_exercises_json_path,
    load_exercises,
)

__all__ = [
    "ExerciseFileError",
    "ExerciseFileParseError",
    "ExerciseFileReadError",
    "get_exercises_json_path",
    "load_exercises",
]
