"""Asset Routes — state of injected mapping-library resources.

Invariants:
    - Read-only: the registry is filled by the startup preload
    - /head renders script/link tags for every registered resource
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from ulogger.services.map_assets import render_head_tags
from ulogger.services.resource_loader import ResourceLoader

router = APIRouter(prefix="/api/v1/assets", tags=["assets"])


def get_resource_loader(request: Request) -> ResourceLoader:
    loader = getattr(request.app.state, "resource_loader", None)
    if loader is None:
        raise RuntimeError("Resource loader not initialized")
    return loader


@router.get("")
async def list_assets(loader: ResourceLoader = Depends(get_resource_loader)):
    return {"resources": loader.registry.snapshot()}


@router.get("/head", response_class=HTMLResponse)
async def head_tags(loader: ResourceLoader = Depends(get_resource_loader)):
    return render_head_tags(loader.registry)
