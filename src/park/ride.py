from __future__ import annotations

import math
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, List, Optional

from .config import InvalidConfigurationError, RideSettings
from .rider import Rider


class RideInvariantError(RuntimeError):
    """Raised when a ride is asked to unload riders it never loaded."""


@dataclass(frozen=True)
class RideStatus:
    name: str
    wait_minutes: int
    queue_length: int


@dataclass(frozen=True)
class RideRecap:
    name: str
    riders_served: int
    loads_completed: int
    average_riders_per_load: Optional[int]


@dataclass
class Ride:
    """A timed batch stage: riders queue, board in loads, and exit each cycle.

    Real rides and the walking pseudo-ride share this class. A stage with
    ``capacity_per_load=None`` takes its whole line on every load.

    Riders stay at the head of ``queue`` while they are aboard, so
    ``queue_length`` counts everyone the stage currently holds.
    """

    name: str
    capacity_per_load: Optional[int]
    cycle_seconds: int
    last_load_time: int = 0
    current_load_size: int = 0
    total_loads_completed: int = 0
    total_riders_served: int = 0
    queue: Deque[Rider] = field(default_factory=deque)

    def __post_init__(self) -> None:
        if not self.name:
            raise InvalidConfigurationError("Ride name must not be empty")
        if self.cycle_seconds <= 0:
            raise InvalidConfigurationError(
                f"Ride '{self.name}' needs a positive cycle, got {self.cycle_seconds}"
            )
        if self.capacity_per_load is not None and self.capacity_per_load <= 0:
            raise InvalidConfigurationError(
                f"Ride '{self.name}' needs a positive load capacity, got {self.capacity_per_load}"
            )

    @classmethod
    def from_settings(cls, settings: RideSettings) -> "Ride":
        return cls(
            name=settings.name,
            capacity_per_load=settings.capacity_per_load,
            cycle_seconds=settings.cycle_seconds,
        )

    @property
    def unbounded(self) -> bool:
        return self.capacity_per_load is None

    @property
    def queue_length(self) -> int:
        return len(self.queue)

    def available(self, time: int) -> bool:
        """True when a cycle ends at ``time`` and nothing was loaded this tick.

        Cycles are aligned to time zero, not to the last load.
        """
        return self.last_load_time != time and time % self.cycle_seconds == 0

    def wait_time(self) -> int:
        """Seconds a rider joining the line now would wait, assuming no one else joins."""
        if not self.queue:
            return 0
        if self.unbounded:
            return self.cycle_seconds
        loads = math.ceil(len(self.queue) / self.capacity_per_load)
        return loads * self.cycle_seconds

    def enter_line(self, rider: Rider) -> None:
        self.queue.append(rider)

    def exit_ride(self) -> List[Rider]:
        if len(self.queue) < self.current_load_size:
            raise RideInvariantError(
                f"Ride '{self.name}' holds {len(self.queue)} riders "
                f"but {self.current_load_size} are aboard"
            )
        finished = [self.queue.popleft() for _ in range(self.current_load_size)]
        self.total_riders_served += len(finished)
        self.current_load_size = 0
        return finished

    def load_ride(self, time: int) -> None:
        self.last_load_time = time
        if self.unbounded:
            self.current_load_size = len(self.queue)
        else:
            self.current_load_size = min(len(self.queue), self.capacity_per_load)
        self.total_loads_completed += 1

    def status(self) -> RideStatus:
        return RideStatus(
            name=self.name,
            wait_minutes=self.wait_time() // 60,
            queue_length=len(self.queue),
        )

    def recap(self) -> RideRecap:
        average = None
        if self.total_loads_completed:
            average = self.total_riders_served // self.total_loads_completed
        return RideRecap(
            name=self.name,
            riders_served=self.total_riders_served,
            loads_completed=self.total_loads_completed,
            average_riders_per_load=average,
        )

    def __len__(self) -> int:
        return len(self.queue)
