"""Text rendering of park snapshots for the console."""
from __future__ import annotations

from typing import List, Optional

from .ride import RideStatus
from .simulation import DailyRecap, StatusSnapshot


def format_clock(seconds: int) -> str:
    hours, remainder = divmod(seconds, 3600)
    minutes, secs = divmod(remainder, 60)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"


def _format_ride(status: RideStatus) -> str:
    return f"[{status.name} {status.wait_minutes} mins ({status.queue_length})]"


def _format_average(value: Optional[int]) -> str:
    return "n/a" if value is None else str(value)


def format_status_line(snapshot: StatusSnapshot) -> str:
    parts = [_format_ride(status) for status in snapshot.rides]
    parts.append(_format_ride(snapshot.walking))
    parts.append(f"[Park {snapshot.visitors_in_park})")
    return format_clock(snapshot.time) + "".join(parts)


def format_announcement(time: int, message: str) -> str:
    return f"{format_clock(time)} {message}"


def format_recap(recap: DailyRecap) -> List[str]:
    lines = [
        "Here's how the day at the park went: ",
        (
            f"The park had {recap.total_visitors} visitors who rode {recap.total_rides} rides "
            f"averaging about {_format_average(recap.average_rides_per_visitor)} rides each"
        ),
    ]
    for ride in recap.rides:
        lines.append(
            f"The {ride.name} had {ride.riders_served} riders in {ride.loads_completed} loads "
            f"averaging {_format_average(ride.average_riders_per_load)} riders each"
        )
    return lines
