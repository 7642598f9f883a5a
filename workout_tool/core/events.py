"""Event stream merging keyboard input with a fixed-rate tick."""

from __future__ import annotations

import logging
import queue
import threading
import time
from dataclasses import dataclass
from typing import Callable, Protocol

from workout_tool.core.config import TICK_PERIOD_SEC
from workout_tool.core.errors import EventChannelError, InputDeviceError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KeyPress:
    key: str


@dataclass(frozen=True)
class Tick:
    pass


Event = KeyPress | Tick

Clock = Callable[[], float]


class InputDevice(Protocol):
    def poll(self, timeout: float) -> bool:
        """Wait up to ``timeout`` seconds for input; True when a key is readable."""

    def read_key(self) -> str | None:
        """Read one decoded key code, or None for bytes that map to no key."""


class _Closed:
    def __init__(self, error: BaseException | None) -> None:
        self.error = error


class EventChannel:
    """Ordered single-producer/single-consumer queue of events."""

    def __init__(self) -> None:
        self._queue: queue.Queue[Event | _Closed] = queue.Queue()

    def send(self, event: Event) -> None:
        self._queue.put(event)

    def close(self, error: BaseException | None = None) -> None:
        self._queue.put(_Closed(error))

    def receive(self) -> Event:
        item = self._queue.get()
        if isinstance(item, _Closed):
            # Keep the marker so later receives fail the same way.
            self._queue.put(item)
            if item.error is not None:
                raise EventChannelError(f"Event source stopped: {item.error}") from item.error
            raise EventChannelError("Event source stopped")
        return item


class EventSource:
    def __init__(
        self,
        device: InputDevice,
        channel: EventChannel,
        tick_period_sec: float = TICK_PERIOD_SEC,
        clock: Clock = time.monotonic,
    ) -> None:
        self._device = device
        self._channel = channel
        self._tick_period = tick_period_sec
        self._clock = clock
        self._next_tick = clock() + tick_period_sec
        self._stop_event = threading.Event()
        self._thread = threading.Thread(
            target=self._run,
            daemon=True,
            name="event-source",
        )

    @property
    def next_tick_time(self) -> float:
        return self._next_tick

    @property
    def is_running(self) -> bool:
        return self._thread.is_alive()

    def start(self) -> None:
        self._thread.start()

    def stop(self, timeout: float = 1.0) -> None:
        self._stop_event.set()
        if self._thread.is_alive():
            self._thread.join(timeout=timeout)

    def step(self) -> Event | None:
        """Run one iteration and return the event it emitted, if any."""
        now = self._clock()
        if now >= self._next_tick:
            self._next_tick = now + self._tick_period
            return self._emit(Tick())

        timeout = max(0.0, self._next_tick - now)
        try:
            if not self._device.poll(timeout):
                return None
            key = self._device.read_key()
        except OSError as exc:
            raise InputDeviceError(f"Unable to read keyboard input: {exc}") from exc
        if key is None:
            return None
        return self._emit(KeyPress(key))

    def _emit(self, event: Event) -> Event:
        self._channel.send(event)
        return event

    def _run(self) -> None:
        try:
            while not self._stop_event.is_set():
                self.step()
        except Exception as exc:
            logger.error("Event source failed: %s", exc)
            self._channel.close(exc)
            return
        self._channel.close()
