"""Single-threaded update/render loop of the dashboard."""

from __future__ import annotations

import logging
import time
from typing import Protocol

from workout_tool.core.config import DashboardConfig
from workout_tool.core.events import Clock, EventChannel
from workout_tool.core.state import AppState, DashboardSnapshot, apply_event

logger = logging.getLogger(__name__)


class Renderer(Protocol):
    def render(self, snapshot: DashboardSnapshot) -> None: ...

    def close(self) -> None: ...


class DashboardController:
    def __init__(
        self,
        channel: EventChannel,
        renderer: Renderer,
        config: DashboardConfig | None = None,
        clock: Clock = time.monotonic,
    ) -> None:
        self._channel = channel
        self._renderer = renderer
        self._config = config or DashboardConfig()
        self._clock = clock
        self.state = AppState(session_origin=clock())
        self._events_handled = 0

    @property
    def events_handled(self) -> int:
        return self._events_handled

    def snapshot(self) -> DashboardSnapshot:
        return self.state.snapshot(self._config.splits, self._clock())

    def run(self) -> AppState:
        logger.info("Dashboard loop started")
        try:
            while True:
                self._renderer.render(self.snapshot())
                event = self._channel.receive()
                self._events_handled += 1
                if apply_event(self.state, event, self._clock(), self._config.split_count):
                    logger.info("Exit requested after %d events", self._events_handled)
                    break
        finally:
            self._renderer.close()
        return self.state
