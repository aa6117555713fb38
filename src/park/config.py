from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


class InvalidConfigurationError(ValueError):
    """Raised when a ride or park is built with unusable parameters."""


@dataclass(frozen=True)
class RideSettings:
    """Static parameters of one timed batch stage."""

    name: str
    capacity_per_load: Optional[int]  # None means no limit per load
    cycle_seconds: int


@dataclass(frozen=True)
class ArrivalSettings:
    """How often visitor groups show up and how large they can be."""

    interval_seconds: int = 60
    max_group_size: int = 10


DEFAULT_RIDES: Tuple[RideSettings, ...] = (
    RideSettings("Coaster", capacity_per_load=12, cycle_seconds=45),
    RideSettings("Chairlift", capacity_per_load=2, cycle_seconds=15),
    RideSettings("Carousel", capacity_per_load=40, cycle_seconds=360),
)

DEFAULT_WALKING = RideSettings("Walking", capacity_per_load=None, cycle_seconds=240)
