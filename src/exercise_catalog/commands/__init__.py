"""CLI commands for exercise-catalog."""

from .activate import activate
from .populate import populate

__all__ = [
    "activate",
    "populate",
]
