from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass
class Rider:
    """A park visitor and the rides they have finished so far."""

    rider_id: str
    history: List[str] = field(default_factory=list)

    def remember_ride(self, ride_name: str) -> None:
        self.history.append(ride_name)

    @property
    def ride_count(self) -> int:
        return len(self.history)

    def __str__(self) -> str:
        return f"{self.rider_id}({self.ride_count} rides)"
