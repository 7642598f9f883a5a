from __future__ import annotations

import pytest

from workout_tool.core.controller import DashboardController
from workout_tool.core.errors import EventChannelError
from workout_tool.core.events import EventChannel, KeyPress, Tick
from workout_tool.core.state import DashboardSnapshot


class RecordingRenderer:
    def __init__(self) -> None:
        self.snapshots: list[DashboardSnapshot] = []
        self.closed = False

    def render(self, snapshot: DashboardSnapshot) -> None:
        self.snapshots.append(snapshot)

    def close(self) -> None:
        self.closed = True


class SteppingClock:
    def __init__(self, step: float = 0.5) -> None:
        self.now = 0.0
        self._step = step

    def __call__(self) -> float:
        self.now += self._step
        return self.now


def test_events_applied_in_order_until_exit() -> None:
    channel = EventChannel()
    for event in (KeyPress("up"), Tick(), KeyPress("down"), KeyPress("esc"), KeyPress("w")):
        channel.send(event)
    renderer = RecordingRenderer()
    controller = DashboardController(channel, renderer)

    state = controller.run()

    assert controller.events_handled == 4
    assert [s.split_index for s in renderer.snapshots] == [0, 3, 3, 0]
    assert renderer.closed is True
    assert state.selected_split == 0
    # The event queued after exit is left unconsumed.
    assert channel.receive() == KeyPress("w")


def test_render_happens_before_each_receive() -> None:
    channel = EventChannel()
    channel.send(KeyPress("w"))
    channel.send(KeyPress("w"))
    channel.send(KeyPress("esc"))
    renderer = RecordingRenderer()

    DashboardController(channel, renderer).run()

    assert [s.set_counter for s in renderer.snapshots] == [0, 1, 2]


def test_scenario_elapsed_is_zero_after_toggle() -> None:
    channel = EventChannel()
    for key in ("w", "w", "down", " ", "esc"):
        channel.send(KeyPress(key))
    renderer = RecordingRenderer()
    clock = SteppingClock(step=0.5)

    state = DashboardController(channel, renderer, clock=clock).run()

    assert (state.selected_split, state.set_counter, state.paused) == (1, 2, False)
    # Render right after the toggle: one clock step since the origin was stamped.
    after_toggle = renderer.snapshots[4]
    assert after_toggle.paused is False
    assert after_toggle.elapsed_sec == pytest.approx(0.5)


def test_paused_timer_reads_zero_through_ticks() -> None:
    channel = EventChannel()
    for _ in range(5):
        channel.send(Tick())
    channel.send(KeyPress("esc"))
    renderer = RecordingRenderer()

    DashboardController(channel, renderer, clock=SteppingClock(step=0.2)).run()

    assert all(s.elapsed_whole_sec == 0 for s in renderer.snapshots)


def test_closed_channel_is_fatal_and_renderer_is_closed() -> None:
    channel = EventChannel()
    channel.send(KeyPress("w"))
    channel.close(OSError("stdin closed"))
    renderer = RecordingRenderer()
    controller = DashboardController(channel, renderer)

    with pytest.raises(EventChannelError):
        controller.run()

    assert renderer.closed is True
    assert controller.state.set_counter == 1
