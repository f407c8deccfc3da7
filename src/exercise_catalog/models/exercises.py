"""Exercise definitions for the catalog source file and the exercises table."""

from dataclasses import dataclass, field

GIF_DIRECTORY = "gifs"


def gif_path_for(exercise_id: str) -> str:
    """Storage path of an exercise's GIF, relative to the media bucket."""
    return f"{GIF_DIRECTORY}/{exercise_id}.gif"


def _string(value, key: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{key} must be a string, got {type(value).__name__}")
    return value


def _string_list(value, key: str) -> list[str]:
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise TypeError(f"{key} must be a list of strings")
    return list(value)


@dataclass
class SourceExercise:
    """Exercise as curated in the catalog JSON file."""

    exercise_id: str
    name: str
    gif_url: str = ""
    target_muscles: list[str] = field(default_factory=list)
    body_parts: list[str] = field(default_factory=list)
    equipments: list[str] = field(default_factory=list)
    secondary_muscles: list[str] = field(default_factory=list)
    instructions: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "SourceExercise":
        """Create from a camelCase JSON object.

        Raises:
            KeyError: If exerciseId or name is absent
            TypeError: If a field has the wrong JSON type
        """
        return cls(
            exercise_id=_string(data["exerciseId"], "exerciseId"),
            name=_string(data["name"], "name"),
            gif_url=data.get("gifUrl") or "",
            target_muscles=_string_list(data.get("targetMuscles"), "targetMuscles"),
            body_parts=_string_list(data.get("bodyParts"), "bodyParts"),
            equipments=_string_list(data.get("equipments"), "equipments"),
            secondary_muscles=_string_list(data.get("secondaryMuscles"), "secondaryMuscles"),
            instructions=_string_list(data.get("instructions"), "instructions"),
        )


@dataclass
class ExerciseRow:
    """Row in the exercises table."""

    exercise_id: str
    name: str
    gif_path: str
    target_muscles: list[str] = field(default_factory=list)
    body_parts: list[str] = field(default_factory=list)
    equipments: list[str] = field(default_factory=list)
    secondary_muscles: list[str] = field(default_factory=list)
    instructions: list[str] = field(default_factory=list)
    is_active: bool = False

    @classmethod
    def from_source(cls, source: SourceExercise) -> "ExerciseRow":
        """Build a new, inactive row from a source exercise.

        The GIF path is derived from the exercise ID rather than the source
        URL, since media is served from our own bucket.
        """
        return cls(
            exercise_id=source.exercise_id,
            name=source.name,
            gif_path=gif_path_for(source.exercise_id),
            target_muscles=list(source.target_muscles),
            body_parts=list(source.body_parts),
            equipments=list(source.equipments),
            secondary_muscles=list(source.secondary_muscles),
            instructions=list(source.instructions),
            is_active=False,
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "exercise_id": self.exercise_id,
            "name": self.name,
            "gif_path": self.gif_path,
            "target_muscles": self.target_muscles,
            "body_parts": self.body_parts,
            "equipments": self.equipments,
            "secondary_muscles": self.secondary_muscles,
            "instructions": self.instructions,
            "is_active": self.is_active,
        }


@dataclass
class StoredExercise:
    """Minimal projection of a stored exercise returned by name searches."""

    id: int | str
    name: str
    exercise_id: str

    @classmethod
    def from_dict(cls, data: dict) -> "StoredExercise":
        """Create from a database row."""
        return cls(
            id=data["id"],
            name=data["name"],
            exercise_id=data["exercise_id"],
        )


# Basic exercises to activate first, grouped by muscle category.
# Each entry is matched as a case-insensitive substring of the exercise name.
BASIC_EXERCISES: dict[str, list[str]] = {
    "chest": ["push up", "bench press", "chest press", "chest fly"],
    "back": ["pull up", "lat pulldown", "barbell row", "seated row"],
    "legs": ["squat", "deadlift", "lunge", "leg press", "calf raise"],
    "shoulders": ["shoulder press", "lateral raise", "rear delt fly"],
    "arms": ["bicep curl", "tricep extension", "hammer curl"],
    "core": ["plank", "crunch", "russian twist", "mountain climber"],
}


def basic_exercise_names() -> list[str]:
    """Flatten BASIC_EXERCISES into activation order."""
    return [name for names in BASIC_EXERCISES.values() for name in names]
