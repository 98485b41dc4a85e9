"""Map asset preload tests — stylesheet + script preload and head tag rendering."""

from ulogger.config import Settings
from ulogger.core.resource_registry import LoadState, ResourceKind, ResourceRegistry
from ulogger.services.map_assets import (
    OPENLAYERS_CSS_ID, OPENLAYERS_SCRIPT_ID, build_loader, preload_map_assets,
    render_head_tags,
)
from ulogger.services.resource_loader import ResourceLoader

JS_URL = "https://cdn.example/ol.js"
CSS_URL = "https://cdn.example/ol.css"


def _settings(**overrides) -> Settings:
    return Settings(openlayers_js_url=JS_URL, openlayers_css_url=CSS_URL, **overrides)


async def test_preload_registers_both_assets(loader):
    assert await preload_map_assets(loader, _settings()) is True
    await loader.drain()

    assert loader.registry.get(OPENLAYERS_SCRIPT_ID).state is LoadState.RESOLVED
    assert loader.registry.get(OPENLAYERS_CSS_ID).state is LoadState.RESOLVED


async def test_preload_reports_script_failure(loader, fetcher):
    fetcher.failing.add(JS_URL)

    assert await preload_map_assets(loader, _settings()) is False
    assert loader.registry.get(OPENLAYERS_SCRIPT_ID).state is LoadState.REJECTED


async def test_preload_reports_timeout(fetcher):
    loader = ResourceLoader(fetcher, default_timeout_ms=5)
    gate = fetcher.gate(JS_URL)

    assert await preload_map_assets(loader, _settings()) is False

    gate.set()
    await loader.drain()
    assert loader.registry.get(OPENLAYERS_SCRIPT_ID).state is LoadState.RESOLVED


async def test_build_loader_uses_configured_timeout():
    loader, fetcher = build_loader(_settings(loader_timeout_ms=1234))
    assert loader.default_timeout_ms == 1234
    await fetcher.aclose()


def test_head_tags_escape_attributes():
    registry = ResourceRegistry()
    registry.register("ol_css", 'https://cdn.example/ol.css?a=1&b="2"', ResourceKind.STYLESHEET)
    registry.register("ol_js", JS_URL, ResourceKind.SCRIPT)

    html = render_head_tags(registry)

    assert html.splitlines() == [
        '<link type="text/css" rel="stylesheet" '
        'href="https://cdn.example/ol.css?a=1&amp;b=&quot;2&quot;" id="ol_css">',
        '<script type="text/javascript" src="https://cdn.example/ol.js" id="ol_js" async></script>',
    ]


def test_head_tags_empty_registry():
    assert render_head_tags(ResourceRegistry()) == ""
