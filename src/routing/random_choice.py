from __future__ import annotations

import random
from typing import Optional, Sequence

from .interface import RideSnapshot


class RandomRouter:
    """Picks any ride uniformly, ignoring queues. Useful as a baseline."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self.random = random.Random(seed)

    def select_ride(self, rides: Sequence[RideSnapshot]) -> str:
        return self.random.choice(list(rides)).name
