from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol, Sequence


@dataclass(frozen=True)
class RideSnapshot:
    """Lightweight view of a ride for routing decisions."""

    name: str
    queue_length: int
    capacity_per_load: Optional[int]
    cycle_seconds: int
    wait_time: int


class Router(Protocol):
    """Strategy interface for sending a walking visitor to their next ride."""

    def select_ride(self, rides: Sequence[RideSnapshot]) -> str:
        """
        Return the name of the ride the visitor should queue for.

        ``rides`` is never empty and is given in the park's fixed ride order.
        """
        ...
