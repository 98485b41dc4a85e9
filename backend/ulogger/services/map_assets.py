"""Map Assets — startup preload of the mapping library and its head-tag rendering.

Invariants:
    - The stylesheet is injected first (it never blocks), then the script is
      loaded with the configured timeout
    - A failed or late preload is logged and reported, never retried; the UI
      falls back to loading the library from the browser
    - Head tags are rendered for every registered resource, attribute values escaped

Design Decisions:
    - Loader built once per app (lifespan) and shared via app.state
"""

import logging

from ulogger.config import Settings
from ulogger.core.errors import ResourceLoadError, ResourceTimeoutError
from ulogger.core.format_strings import html_encode, sprintf
from ulogger.core.resource_registry import ResourceKind, ResourceRegistry
from ulogger.infrastructure.asset_fetcher import AssetFetcher
from ulogger.services.resource_loader import ResourceLoader

logger = logging.getLogger(__name__)

OPENLAYERS_SCRIPT_ID = "ol_js"
OPENLAYERS_CSS_ID = "ol_css"

_SCRIPT_TAG = '<script type="text/javascript" src="%s" id="%s" async></script>'
_STYLESHEET_TAG = '<link type="text/css" rel="stylesheet" href="%s" id="%s">'


def build_loader(settings: Settings) -> tuple[ResourceLoader, AssetFetcher]:
    fetcher = AssetFetcher(timeout_seconds=settings.asset_fetch_timeout_seconds)
    loader = ResourceLoader(fetcher, default_timeout_ms=settings.loader_timeout_ms)
    return loader, fetcher


async def preload_map_assets(loader: ResourceLoader, settings: Settings) -> bool:
    """Load the OpenLayers stylesheet and script; False when the script failed."""
    await loader.inject(
        settings.openlayers_css_url, OPENLAYERS_CSS_ID, ResourceKind.STYLESHEET,
    )
    try:
        await loader.load(settings.openlayers_js_url, OPENLAYERS_SCRIPT_ID)
    except (ResourceTimeoutError, ResourceLoadError) as e:
        logger.warning(
            f"Map library preload failed: {e.message}",
            extra={"resource_id": OPENLAYERS_SCRIPT_ID, "error_code": e.code},
        )
        return False
    return True


def render_head_tags(registry: ResourceRegistry) -> str:
    tags = []
    for entry in registry.snapshot():
        template = _SCRIPT_TAG if entry["kind"] == ResourceKind.SCRIPT.value else _STYLESHEET_TAG
        tags.append(sprintf(template, html_encode(entry["url"]), html_encode(entry["id"])))
    return "\n".join(tags)
