"""Track Summary — distance and duration totals over ordered positions.

Invariants:
    - Positions are consumed in the order given (callers sort by time, then id)
    - Distance is the sum of great-circle legs between consecutive positions
    - Empty track: zero points, zero distance, no duration
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass, asdict
from datetime import datetime
from typing import Protocol

EARTH_RADIUS_M = 6371000.0


class PositionLike(Protocol):
    latitude: float
    longitude: float
    time: datetime


@dataclass(frozen=True)
class TrackSummary:
    point_count: int
    distance_m: float
    duration_s: float | None

    def to_dict(self) -> dict:
        return asdict(self)


def deg2rad(degrees: float) -> float:
    return degrees * math.pi / 180


def haversine_meters(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance in meters."""
    phi1, phi2 = deg2rad(lat1), deg2rad(lat2)
    dphi = phi2 - phi1
    dlambda = deg2rad(lon2 - lon1)
    a = math.sin(dphi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlambda / 2) ** 2
    return EARTH_RADIUS_M * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def summarize_track(positions: Sequence[PositionLike]) -> TrackSummary:
    if not positions:
        return TrackSummary(point_count=0, distance_m=0.0, duration_s=None)
    distance = 0.0
    for prev, cur in zip(positions, positions[1:]):
        distance += haversine_meters(
            prev.latitude, prev.longitude, cur.latitude, cur.longitude,
        )
    duration = (positions[-1].time - positions[0].time).total_seconds()
    return TrackSummary(
        point_count=len(positions), distance_m=distance, duration_s=duration,
    )
