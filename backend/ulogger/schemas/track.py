"""Track Schemas — response models for tracks and map layers.

Invariants:
    - Models built from ORM rows via from_attributes
"""

from pydantic import BaseModel, ConfigDict


class TrackResponse(BaseModel):
    """Track as listed for a user."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    name: str
    comment: str | None = None


class LayerResponse(BaseModel):
    """Map tile layer."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    url: str
    priority: int


class TrackSummaryResponse(BaseModel):
    track_id: int
    point_count: int
    distance_m: float
    duration_s: float | None
    label: str
