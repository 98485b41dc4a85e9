"""Asset Fetcher — HTTP download of external scripts and stylesheets via httpx.

Invariants:
    - Non-2xx responses raise (httpx.HTTPStatusError) so the loader marks them rejected
    - No retries: a failed fetch is reported once to the loader
    - Redirects followed (CDNs redirect versionless URLs)

Design Decisions:
    - Callable object so ResourceLoader depends on a plain async function signature
    - One AsyncClient per fetcher, closed on app shutdown
"""

import logging

import httpx

logger = logging.getLogger(__name__)


class AssetFetcher:
    """async (url) -> bytes over a shared httpx.AsyncClient."""

    def __init__(
        self, timeout_seconds: float = 30.0, client: httpx.AsyncClient | None = None,
    ):
        self.client = client or httpx.AsyncClient(
            timeout=timeout_seconds, follow_redirects=True,
        )

    async def __call__(self, url: str) -> bytes:
        response = await self.client.get(url)
        response.raise_for_status()
        logger.debug(f"Fetched {url} ({len(response.content)} bytes)")
        return response.content

    async def aclose(self) -> None:
        await self.client.aclose()
