"""JSON scenario files, validated with pydantic and turned into simulations."""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field, NonNegativeInt, PositiveInt, field_validator

from .config import (
    DEFAULT_RIDES,
    DEFAULT_WALKING,
    ArrivalSettings,
    RideSettings,
)
from .simulation import Simulation


class RideConfig(BaseModel):
    name: str = Field(min_length=1)
    capacity_per_load: PositiveInt
    cycle_seconds: PositiveInt

    def to_settings(self) -> RideSettings:
        return RideSettings(
            name=self.name,
            capacity_per_load=self.capacity_per_load,
            cycle_seconds=self.cycle_seconds,
        )


def _default_rides() -> List[RideConfig]:
    return [
        RideConfig(
            name=s.name,
            capacity_per_load=s.capacity_per_load,
            cycle_seconds=s.cycle_seconds,
        )
        for s in DEFAULT_RIDES
    ]


class ArrivalConfig(BaseModel):
    interval_seconds: PositiveInt = 60
    max_group_size: NonNegativeInt = 10


class RouterConfig(BaseModel):
    name: str = "shortest_wait"
    options: dict = {}


class ScenarioConfig(BaseModel):
    name: str = "default"
    description: Optional[str] = None
    closing_time: PositiveInt = 8 * 3600
    start_leaving_offset: NonNegativeInt = 30 * 60
    status_interval: PositiveInt = 15 * 60
    random_seed: Optional[int] = None
    rides: List[RideConfig] = Field(default_factory=_default_rides, min_length=1)
    walking_seconds: PositiveInt = DEFAULT_WALKING.cycle_seconds
    arrivals: ArrivalConfig = Field(default_factory=ArrivalConfig)
    router: RouterConfig = Field(default_factory=RouterConfig)

    @field_validator("rides")
    @classmethod
    def _unique_ride_names(cls, rides: List[RideConfig]) -> List[RideConfig]:
        names = [ride.name for ride in rides]
        if len(set(names)) != len(names):
            raise ValueError(f"ride names must be unique, got {names}")
        return rides


def build_simulation(config: ScenarioConfig, random_seed: Optional[int] = None) -> Simulation:
    seed = random_seed if random_seed is not None else config.random_seed
    return Simulation(
        closing_time=config.closing_time,
        start_leaving_offset=config.start_leaving_offset,
        status_interval=config.status_interval,
        rides=[ride.to_settings() for ride in config.rides],
        walking=RideSettings(DEFAULT_WALKING.name, None, config.walking_seconds),
        arrivals=ArrivalSettings(
            interval_seconds=config.arrivals.interval_seconds,
            max_group_size=config.arrivals.max_group_size,
        ),
        router=config.router.name,
        router_options=config.router.options,
        random_seed=seed,
    )
