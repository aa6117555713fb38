"""Simulation primitives for a day at the amusement park."""

import logging

from .config import (
    DEFAULT_RIDES,
    DEFAULT_WALKING,
    ArrivalSettings,
    InvalidConfigurationError,
    RideSettings,
)
from .logging_config import configure_from_env, enable_console_logging, set_level
from .ride import Ride, RideInvariantError, RideRecap, RideStatus
from .rider import Rider
from .simulation import DailyRecap, Simulation, StatusSnapshot

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ArrivalSettings",
    "DEFAULT_RIDES",
    "DEFAULT_WALKING",
    "DailyRecap",
    "InvalidConfigurationError",
    "Ride",
    "RideInvariantError",
    "RideRecap",
    "RideSettings",
    "RideStatus",
    "Rider",
    "Simulation",
    "StatusSnapshot",
    "configure_from_env",
    "enable_console_logging",
    "set_level",
]
