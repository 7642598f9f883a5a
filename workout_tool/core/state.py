"""Dashboard state and the transitions applied for each event."""

from __future__ import annotations

import time
from dataclasses import dataclass, field

from workout_tool.core.events import Event, KeyPress, Tick
from workout_tool.core.keys import action_for_key
from workout_tool.workout.model import Split
from workout_tool.workout.splits import get_split, split_names


@dataclass(frozen=True)
class DashboardSnapshot:
    split_index: int
    split_names: tuple[str, ...]
    split_name: str
    exercises: tuple[str, ...]
    set_counter: int
    paused: bool
    elapsed_sec: float

    @property
    def elapsed_whole_sec(self) -> int:
        return int(self.elapsed_sec)


@dataclass
class AppState:
    selected_split: int = 0
    set_counter: int = 0
    paused: bool = True
    session_origin: float = field(default_factory=time.monotonic)

    def select_previous(self, split_count: int) -> None:
        if self.selected_split == 0:
            self.selected_split = split_count - 1
        else:
            self.selected_split -= 1

    def select_next(self, split_count: int) -> None:
        if self.selected_split >= split_count - 1:
            self.selected_split = 0
        else:
            self.selected_split += 1

    def increment(self) -> None:
        self.set_counter += 1

    def decrement(self) -> None:
        if self.set_counter > 0:
            self.set_counter -= 1

    def toggle_timer(self, now: float) -> None:
        self.paused = not self.paused
        self.session_origin = now

    def on_tick(self, now: float) -> None:
        # While paused the origin follows the clock so elapsed stays at 0.
        if self.paused:
            self.session_origin = now

    def elapsed(self, now: float) -> float:
        return max(0.0, now - self.session_origin)

    def snapshot(self, splits: tuple[Split, ...], now: float) -> DashboardSnapshot:
        split = get_split(self.selected_split, splits)
        return DashboardSnapshot(
            split_index=self.selected_split,
            split_names=split_names(splits),
            split_name=split.name,
            exercises=split.exercises,
            set_counter=self.set_counter,
            paused=self.paused,
            elapsed_sec=self.elapsed(now),
        )


def apply_event(state: AppState, event: Event, now: float, split_count: int) -> bool:
    """Apply ``event`` to ``state`` in place; True means the dashboard should exit."""
    if isinstance(event, Tick):
        state.on_tick(now)
        return False
    if not isinstance(event, KeyPress):
        raise TypeError(f"Unsupported event: {event!r}")

    action = action_for_key(event.key)
    if action == "exit":
        return True
    if action == "split_up":
        state.select_previous(split_count)
    elif action == "split_down":
        state.select_next(split_count)
    elif action == "increment":
        state.increment()
    elif action == "decrement":
        state.decrement()
    elif action == "toggle_timer":
        state.toggle_timer(now)
    return False
