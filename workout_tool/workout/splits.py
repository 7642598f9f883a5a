"""Built-in training splits shown by the dashboard."""

from __future__ import annotations

from workout_tool.workout.model import Split


SPLITS: tuple[Split, ...] = (
    Split(
        name="Pull",
        exercises=("Chin-Ups", "Rows", "Bicep Curls", "Hanging"),
    ),
    Split(
        name="Push",
        exercises=("Dips", "Push-Ups", "Lateral Raises"),
    ),
    Split(
        name="Legs",
        exercises=("Squats", "Nordic Curls", "Calf Raises", "Leg Raises"),
    ),
    Split(
        name="Accs",
        exercises=("Romanian Deadlifts", "External Rotation", "Resting Deep-Squat"),
    ),
)


def split_names(splits: tuple[Split, ...] = SPLITS) -> tuple[str, ...]:
    return tuple(split.name for split in splits)


def get_split(index: int, splits: tuple[Split, ...] = SPLITS) -> Split:
    if not 0 <= index < len(splits):
        raise IndexError(f"Unknown split index: {index}")
    return splits[index]
