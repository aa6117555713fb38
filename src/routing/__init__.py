from __future__ import annotations

from typing import Dict, Type

from .interface import RideSnapshot, Router
from .random_choice import RandomRouter
from .shortest_wait import ShortestWaitRouter

__all__ = [
    "RandomRouter",
    "RideSnapshot",
    "Router",
    "ShortestWaitRouter",
    "get_router",
]


ROUTER_REGISTRY: Dict[str, Type[Router]] = {
    "shortest_wait": ShortestWaitRouter,
    "random": RandomRouter,
}


def get_router(name: str, **kwargs) -> Router:
    cls = ROUTER_REGISTRY.get(name.lower())
    if cls is None:
        raise ValueError(f"Unknown router '{name}'. Available: {', '.join(ROUTER_REGISTRY)}")
    return cls(**kwargs)
