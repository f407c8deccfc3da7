"""Exercise catalog loader from JSON."""

import json
from pathlib import Path

from ..models.exercises import SourceExercise


class ExerciseFileError(Exception):
    """Raised when the exercise catalog file cannot be loaded."""

    def __init__(self, path: Path, message: str):
        self.path = path
        super().__init__(f"{path}: {message}")


class ExerciseFileReadError(ExerciseFileError):
    """The catalog file is missing or unreadable."""


class ExerciseFileParseError(ExerciseFileError):
    """The catalog file is not a valid JSON array of exercises."""


def get_exercises_json_path(base_dir: Path | None = None) -> Path:
    """Get the path to the exercises JSON file.

    Resolved against the current working directory unless base_dir is given.
    """
    if base_dir is None:
        base_dir = Path.cwd()
    return base_dir / "src" / "data" / "exercises.json"


def load_exercises(path: Path | None = None) -> list[SourceExercise]:
    """Load exercises from the catalog JSON file.

    Args:
        path: Path to the JSON file. Uses the default location if not provided.

    Returns:
        List of SourceExercise objects, in file order

    Raises:
        ExerciseFileReadError: If the file is missing or cannot be read
        ExerciseFileParseError: If the content is not a JSON array of exercises
    """
    if path is None:
        path = get_exercises_json_path()
    path = Path(path)

    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ExerciseFileReadError(path, e.strerror or str(e)) from e
    except UnicodeDecodeError as e:
        raise ExerciseFileParseError(path, f"not valid UTF-8 ({e.reason})") from e

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ExerciseFileParseError(path, f"invalid JSON ({e})") from e

    if not isinstance(data, list):
        raise ExerciseFileParseError(path, "expected a JSON array of exercises")

    exercises = []
    for index, ex_data in enumerate(data):
        if not isinstance(ex_data, dict):
            raise ExerciseFileParseError(path, f"entry {index} is not an object")
        try:
            exercises.append(SourceExercise.from_dict(ex_data))
        except KeyError as e:
            raise ExerciseFileParseError(
                path, f"entry {index} is missing field {e.args[0]!r}"
            ) from e
        except TypeError as e:
            raise ExerciseFileParseError(path, f"entry {index}: {e}") from e

    return exercises
