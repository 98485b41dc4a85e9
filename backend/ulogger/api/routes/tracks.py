"""Track Routes — track listing, position feed, position upload, and track summary.

Invariants:
    - Path and query ids pass through core.coercion (CoercedInt / OptionalInt)
    - Unknown user or track → ResourceNotFoundError (404 via global handler)
    - Feed positions ordered by time, then id; after_id returns only newer rows
    - Posted form fields are coerced before a Position row is created

Design Decisions:
    - Form read from the raw request: clients post ad-hoc field sets, and
      coercion (not a pydantic model) defines which fields are required
"""

import logging

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ulogger.config import Settings, get_settings
from ulogger.core.coercion import CoercedInt, OptionalInt
from ulogger.core.errors import ResourceNotFoundError
from ulogger.core.format_strings import sprintf
from ulogger.core.track_summary import summarize_track
from ulogger.infrastructure.database import get_db
from ulogger.models.position import Position
from ulogger.models.track import Track
from ulogger.models.user import User
from ulogger.schemas.track import TrackResponse, TrackSummaryResponse
from ulogger.services.position_feed import (
    SpeedScale, build_feed, build_position_payload, locale_from_settings,
    position_from_form,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1", tags=["tracks"])


async def get_track_or_404(track_id: int, db: AsyncSession) -> Track:
    track = await db.get(Track, track_id)
    if not track:
        raise ResourceNotFoundError("Track", str(track_id))
    return track


async def _load_positions(
    db: AsyncSession, track_id: int, after_id: int | None = None,
) -> list[Position]:
    query = select(Position).where(Position.track_id == track_id)
    if after_id is not None:
        query = query.where(Position.id > after_id)
    query = query.order_by(Position.time, Position.id)
    result = await db.execute(query)
    return list(result.scalars().all())


@router.get("/users/{user_id}/tracks", response_model=list[TrackResponse])
async def list_user_tracks(
    user_id: CoercedInt, db: AsyncSession = Depends(get_db),
):
    """List a user's tracks, newest first."""
    if not await db.get(User, user_id):
        raise ResourceNotFoundError("User", str(user_id))
    result = await db.execute(
        select(Track).where(Track.user_id == user_id).order_by(Track.id.desc()),
    )
    return result.scalars().all()


@router.get("/tracks/{track_id}/positions")
async def list_positions(
    track_id: CoercedInt,
    after_id: OptionalInt = None,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Positions of a track with display strings and speed colors."""
    await get_track_or_404(track_id, db)
    positions = await _load_positions(db, track_id, after_id)
    return {
        "track_id": track_id,
        "positions": build_feed(
            positions, locale_from_settings(settings),
            SpeedScale.from_settings(settings),
        ),
    }


@router.post("/tracks/{track_id}/positions", status_code=status.HTTP_201_CREATED)
async def add_position(
    track_id: CoercedInt,
    request: Request,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Store one position posted as form fields."""
    track = await get_track_or_404(track_id, db)
    form = await request.form()
    position = position_from_form(form, track)
    db.add(position)
    await db.commit()
    await db.refresh(position)
    logger.info(
        f"Position {position.id} added",
        extra={"track_id": track_id, "user_id": track.user_id},
    )
    return build_position_payload(
        position, locale_from_settings(settings),
        SpeedScale.from_settings(settings),
    )


@router.get("/tracks/{track_id}/summary", response_model=TrackSummaryResponse)
async def track_summary(
    track_id: CoercedInt, db: AsyncSession = Depends(get_db),
):
    """Point count, distance and duration of a track."""
    track = await get_track_or_404(track_id, db)
    summary = summarize_track(await _load_positions(db, track_id))
    label = sprintf(
        "%s: %d points, %s km", track.name, summary.point_count,
        f"{summary.distance_m / 1000:.2f}",
    )
    return TrackSummaryResponse(track_id=track_id, label=label, **summary.to_dict())
