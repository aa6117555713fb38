"""
Shared pytest fixtures for the park simulation tests.
"""

import logging
from typing import List

import pytest

from park import ArrivalSettings, RideSettings, Simulation


class FixedGroups:
    """Stand-in random source that always returns the largest group size."""

    def __init__(self) -> None:
        self.calls: List[tuple] = []

    def randint(self, a: int, b: int) -> int:
        self.calls.append((a, b))
        return b


@pytest.fixture
def fixed_groups() -> FixedGroups:
    return FixedGroups()


@pytest.fixture
def single_ride_park(fixed_groups):
    """One chairlift-like ride and a single group of two visitors at time zero."""
    return Simulation(
        closing_time=3600,
        start_leaving_offset=600,
        status_interval=600,
        rides=[RideSettings("Chairlift", capacity_per_load=2, cycle_seconds=15)],
        arrivals=ArrivalSettings(interval_seconds=3600, max_group_size=2),
        rng=fixed_groups,
    )


@pytest.fixture(autouse=True)
def reset_park_logging():
    """Reset the park logger so handlers added by one test don't leak."""
    logger = logging.getLogger("park")

    def _reset() -> None:
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
            if not isinstance(handler, logging.NullHandler):
                handler.close()
        logger.addHandler(logging.NullHandler())
        logger.setLevel(logging.NOTSET)

    _reset()
    yield
    _reset()
