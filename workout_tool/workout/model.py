"""Workout domain models."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Split:
    name: str
    exercises: tuple[str, ...]
