"""Settings Routes — runtime config, map layers, and UI preference cookies.

Invariants:
    - GET /config returns defaults overlaid with stored values
    - PUT /config reports changed=False when nothing differs (no write)
    - Preference cookies are named ulogger_<name>, path "/", SameSite=Lax;
      days=0 sets a session cookie
"""

import logging

from fastapi import APIRouter, Depends, Path, Query, Response
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ulogger.core.coercion import get_string
from ulogger.infrastructure.database import get_db
from ulogger.models.layer import Layer
from ulogger.schemas.config import ConfigResponse, ConfigUpdate
from ulogger.schemas.track import LayerResponse
from ulogger.services.config_store import read_config, update_config

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1", tags=["settings"])

COOKIE_PREFIX = "ulogger_"
SECONDS_PER_DAY = 24 * 60 * 60


@router.get("/config", response_model=ConfigResponse)
async def get_config(db: AsyncSession = Depends(get_db)):
    return ConfigResponse(config=await read_config(db))


@router.put("/config", response_model=ConfigResponse)
async def put_config(body: ConfigUpdate, db: AsyncSession = Depends(get_db)):
    changed, config = await update_config(db, body.values)
    return ConfigResponse(changed=changed, config=config)


@router.get("/layers", response_model=list[LayerResponse])
async def list_layers(db: AsyncSession = Depends(get_db)):
    """Map layers in display order."""
    result = await db.execute(select(Layer).order_by(Layer.priority, Layer.id))
    return result.scalars().all()


@router.put("/preferences/{name}")
async def set_preference(
    response: Response,
    name: str = Path(pattern=r"^[a-z_]{1,20}$"),
    value: str = Query(...),
    days: int = Query(30, ge=0),
):
    """Remember a UI preference in a cookie."""
    cookie_value = get_string(value, field="value")
    response.set_cookie(
        f"{COOKIE_PREFIX}{name}", cookie_value,
        expires=days * SECONDS_PER_DAY if days else None,
        path="/", samesite="lax",
    )
    return {"name": name, "value": cookie_value}
