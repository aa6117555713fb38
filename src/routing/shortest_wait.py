from __future__ import annotations

from typing import Sequence

from .interface import RideSnapshot


class ShortestWaitRouter:
    """Sends visitors to the ride with the lowest estimated wait.

    Greedy and without lookahead; the first ride in park order wins ties.
    """

    def select_ride(self, rides: Sequence[RideSnapshot]) -> str:
        best = rides[0]
        for ride in rides:
            if ride.wait_time < best.wait_time:
                best = ride
        return best.name
