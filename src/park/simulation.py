from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Protocol, Sequence, Union

from routing import RideSnapshot, Router, get_router

from .config import (
    DEFAULT_RIDES,
    DEFAULT_WALKING,
    ArrivalSettings,
    InvalidConfigurationError,
    RideSettings,
)
from .ride import Ride, RideRecap, RideStatus
from .rider import Rider

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    def randint(self, a: int, b: int) -> int:
        ...


@dataclass(frozen=True)
class StatusSnapshot:
    time: int
    rides: List[RideStatus]
    walking: RideStatus
    visitors_in_park: int


@dataclass(frozen=True)
class DailyRecap:
    total_visitors: int
    total_rides: int
    average_rides_per_visitor: Optional[int]
    rides: List[RideRecap]


class Simulation:
    """Second-by-second simulation of one day at the park.

    Visitors arrive in groups into the walking stage, get routed to a ride
    whenever a walk finishes, ride in batches, and walk again until the
    park starts emptying, at which point finished walks lead to the exit.
    """

    def __init__(
        self,
        closing_time: int,
        start_leaving_offset: int,
        status_interval: int,
        rides: Optional[Sequence[RideSettings]] = None,
        walking: RideSettings = DEFAULT_WALKING,
        arrivals: Optional[ArrivalSettings] = None,
        router: Union[str, Router] = "shortest_wait",
        router_options: Optional[dict] = None,
        random_seed: Optional[int] = None,
        rng: Optional[RandomSource] = None,
    ) -> None:
        arrivals = arrivals or ArrivalSettings()
        self._validate(closing_time, start_leaving_offset, status_interval, arrivals)

        self.closing_time = closing_time
        self.start_leaving_offset = start_leaving_offset
        self.status_interval = status_interval
        self.stop_arrival_time = closing_time // 2
        self.arrivals = arrivals
        self.random = rng if rng is not None else random.Random(random_seed)

        ride_settings = list(DEFAULT_RIDES if rides is None else rides)
        if not ride_settings:
            raise InvalidConfigurationError("The park needs at least one ride")
        self.rides: List[Ride] = [Ride.from_settings(s) for s in ride_settings]
        self.walking = Ride.from_settings(walking)
        if not self.walking.unbounded:
            raise InvalidConfigurationError(
                f"Walking stage '{self.walking.name}' must not limit its load size"
            )
        self._rides_by_name: Dict[str, Ride] = {}
        for ride in self.rides:
            if ride.unbounded:
                raise InvalidConfigurationError(f"Ride '{ride.name}' needs a load capacity")
            if ride.name in self._rides_by_name or ride.name == self.walking.name:
                raise InvalidConfigurationError(f"Duplicate ride name '{ride.name}'")
            self._rides_by_name[ride.name] = ride

        if isinstance(router, str):
            self.router_name = router
            self.router: Router = get_router(router, **(router_options or {}))
        else:
            self.router_name = type(router).__name__
            self.router = router

        self.current_time: int = 0
        self.total_visitors: int = 0
        self.total_rides: int = 0
        self.event_hooks: Dict[str, List[Callable[[object], None]]] = {}

    @staticmethod
    def _validate(
        closing_time: int,
        start_leaving_offset: int,
        status_interval: int,
        arrivals: ArrivalSettings,
    ) -> None:
        if closing_time <= 0:
            raise InvalidConfigurationError(f"closing_time must be positive, got {closing_time}")
        if start_leaving_offset < 0:
            raise InvalidConfigurationError(
                f"start_leaving_offset must not be negative, got {start_leaving_offset}"
            )
        if status_interval <= 0:
            raise InvalidConfigurationError(
                f"status_interval must be positive, got {status_interval}"
            )
        if arrivals.interval_seconds <= 0:
            raise InvalidConfigurationError(
                f"arrival interval must be positive, got {arrivals.interval_seconds}"
            )
        if arrivals.max_group_size < 0:
            raise InvalidConfigurationError(
                f"max_group_size must not be negative, got {arrivals.max_group_size}"
            )

    def run(self) -> DailyRecap:
        """Run until closing time and until every visitor has left."""
        self._announce("open", "Park is open!")
        while self.current_time < self.closing_time or self.visitors_in_park() > 0:
            self.step()
            if self.current_time == self.closing_time:
                self._announce("closing", "The park is closing...")
        self._announce("closed", "The park is closed!")
        return self.recap()

    def run_for(self, duration: int) -> None:
        for _ in range(duration):
            self.step()

    def step(self) -> None:
        now = self.current_time

        if now % self.status_interval == 0:
            snapshot = self.status()
            logger.debug("status at %ds: %s", now, snapshot)
            self._emit("status", snapshot)

        if now < self.stop_arrival_time and now % self.arrivals.interval_seconds == 0:
            self._admit_group()

        if self.walking.available(now):
            for rider in self.walking.exit_ride():
                if now < self.closing_time - self.start_leaving_offset:
                    self._route(rider)
                else:
                    self._depart(rider)

        for ride in self.rides:
            if ride.available(now):
                for rider in ride.exit_ride():
                    rider.remember_ride(ride.name)
                    self.walking.enter_line(rider)
                ride.load_ride(now)
                if ride.current_load_size:
                    logger.debug("%s loaded %d riders at %ds", ride.name, ride.current_load_size, now)

        self.walking.load_ride(now)

        self.current_time += 1

    def on_event(self, event: str, callback: Callable[[object], None]) -> None:
        self.event_hooks.setdefault(event, []).append(callback)

    def visitors_in_park(self) -> int:
        return sum(len(ride) for ride in self.rides) + len(self.walking)

    def get_ride(self, name: str) -> Optional[Ride]:
        return self._rides_by_name.get(name)

    def status(self) -> StatusSnapshot:
        return StatusSnapshot(
            time=self.current_time,
            rides=[ride.status() for ride in self.rides],
            walking=self.walking.status(),
            visitors_in_park=self.visitors_in_park(),
        )

    def recap(self) -> DailyRecap:
        average = None
        if self.total_visitors:
            average = self.total_rides // self.total_visitors
        return DailyRecap(
            total_visitors=self.total_visitors,
            total_rides=self.total_rides,
            average_rides_per_visitor=average,
            rides=[ride.recap() for ride in self.rides],
        )

    def _admit_group(self) -> None:
        if self.arrivals.max_group_size == 0:
            return
        group_size = self.random.randint(1, self.arrivals.max_group_size)
        for _ in range(group_size):
            self.total_visitors += 1
            self.walking.enter_line(Rider(f"Visitor-{self.total_visitors}"))
        logger.debug("%d visitors arrived at %ds", group_size, self.current_time)
        self._emit("arrival", {"time": self.current_time, "count": group_size})

    def _route(self, rider: Rider) -> None:
        choice = self.router.select_ride(self._snapshot_rides())
        ride = self._rides_by_name.get(choice)
        if ride is None:
            raise ValueError(f"Router chose unknown ride '{choice}'")
        ride.enter_line(rider)

    def _depart(self, rider: Rider) -> None:
        self.total_rides += rider.ride_count
        logger.debug("Departing %s at %ds", rider, self.current_time)
        self._emit(
            "departure",
            {"time": self.current_time, "rider": rider.rider_id, "rides": list(rider.history)},
        )

    def _snapshot_rides(self) -> List[RideSnapshot]:
        return [
            RideSnapshot(
                name=ride.name,
                queue_length=len(ride.queue),
                capacity_per_load=ride.capacity_per_load,
                cycle_seconds=ride.cycle_seconds,
                wait_time=ride.wait_time(),
            )
            for ride in self.rides
        ]

    def _announce(self, event: str, message: str) -> None:
        logger.info("%s (t=%ds)", message, self.current_time)
        self._emit(event, {"time": self.current_time, "message": message})

    def _emit(self, event: str, payload: object) -> None:
        for callback in self.event_hooks.get(event, []):
            callback(payload)
