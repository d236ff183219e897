"""Shared enums for schemas and API."""

from enum import Enum


class UnitSystem(str, Enum):
    """Units the user enters weights and body measurements in."""

    METRIC = "metric"
    IMPERIAL = "imperial"


class MoveDirection(int, Enum):
    """Direction to move a routine exercise in the routine order."""

    UP = -1
    DOWN = 1
