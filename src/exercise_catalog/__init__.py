"""exercise-catalog: admin tooling for the exercise library."""

__version__ = "0.1.0"
