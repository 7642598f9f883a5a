"""Fixed runtime parameters for the terminal dashboard."""

from __future__ import annotations

from dataclasses import dataclass

from workout_tool.workout.model import Split
from workout_tool.workout.splits import SPLITS

APP_NAME = "Workout Tool"
APP_VERSION = "0.1.0"

# Cadence of synthetic Tick events driving the timer display.
TICK_PERIOD_SEC = 0.2


@dataclass(frozen=True)
class DashboardConfig:
    tick_period_sec: float = TICK_PERIOD_SEC
    splits: tuple[Split, ...] = SPLITS
    title: str = f"{APP_NAME} Version {APP_VERSION}"

    def __post_init__(self) -> None:
        if self.tick_period_sec <= 0:
            raise ValueError("tick_period_sec must be positive")
        if not self.splits:
            raise ValueError("At least one split is required")

    @property
    def split_count(self) -> int:
        return len(self.splits)
