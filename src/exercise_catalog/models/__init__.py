"""Data models for exercise-catalog."""

from .exercises import (
    BASIC_EXERCISES,
    ExerciseRow,
    SourceExercise,
    StoredExercise,
    basic_exercise_names,
    gif_path_for,
)

__all__ = [
    "BASIC_EXERCISES",
    "basic_exercise_names",
    "ExerciseRow",
    "gif_path_for",
    "SourceExercise",
    "StoredExercise",
]
