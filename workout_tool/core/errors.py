"""Fatal error types for the dashboard runtime."""

from __future__ import annotations


class DashboardError(RuntimeError):
    """Base class for errors that end the dashboard session."""


class TerminalError(DashboardError):
    """Raised when the terminal cannot be put into (or out of) cbreak mode."""


class InputDeviceError(DashboardError):
    """Raised when keyboard input cannot be polled or read."""


class EventChannelError(DashboardError):
    """Raised by the consumer when the event producer is gone."""
