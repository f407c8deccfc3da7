"""Database layer for exercise-catalog."""

from .client import create_store_client
from .repositories import ExerciseRepository, ExerciseStore, StoreError

__all__ = [
    "create_store_client",
    "ExerciseRepository",
    "ExerciseStore",
    "StoreError",
]
