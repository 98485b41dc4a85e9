"""Resource Loader — inject external scripts/stylesheets, racing each load against a timer.

Invariants:
    - An identifier already in the registry resolves immediately, whatever its state
      (presence is checked, not in-flight state; a second caller never re-fetches)
    - Registration happens before the first await, so concurrent callers for one
      identifier see it at once
    - Scripts settle on fetch completion: RESOLVED, or REJECTED + ResourceLoadError
    - Stylesheets resolve on registration; their fetch finishes in the background
    - load() never cancels the losing side of the race: after a timeout the fetch
      keeps running and still settles the registry entry
    - No retries: every failure goes to the immediate caller

Design Decisions:
    - Fetching is an injected async callable (httpx in production, fakes in tests)
    - asyncio.wait(timeout=...) over asyncio.wait_for: wait_for cancels the inner
      task on timeout, which would undo the load
    - Background tasks kept in a set so they are not garbage collected mid-flight;
      drain() awaits them on shutdown
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable

from ulogger.core.errors import ResourceLoadError, ResourceTimeoutError
from ulogger.core.resource_registry import ResourceKind, ResourceRegistry

logger = logging.getLogger(__name__)

Fetcher = Callable[[str], Awaitable[bytes]]

DEFAULT_TIMEOUT_MS = 10_000


class ResourceLoader:
    """Loads resources once per identifier into its registry."""

    def __init__(
        self,
        fetch: Fetcher,
        registry: ResourceRegistry | None = None,
        default_timeout_ms: int = DEFAULT_TIMEOUT_MS,
    ):
        self._fetch = fetch
        self.registry = registry if registry is not None else ResourceRegistry()
        self.default_timeout_ms = default_timeout_ms
        self._pending: set[asyncio.Task] = set()

    async def inject(
        self, url: str, resource_id: str, kind: ResourceKind = ResourceKind.SCRIPT,
    ) -> None:
        """Register and fetch a resource; returns once it is usable."""
        if resource_id in self.registry:
            logger.debug(
                f"Resource {resource_id} already injected",
                extra={"resource_id": resource_id},
            )
            return
        self.registry.register(resource_id, url, kind)
        if kind is ResourceKind.STYLESHEET:
            self._track(asyncio.ensure_future(self._settle(url, resource_id)))
            return
        await self._settle(url, resource_id)

    async def load(
        self,
        url: str,
        resource_id: str,
        timeout_ms: int | None = None,
        kind: ResourceKind = ResourceKind.SCRIPT,
    ) -> None:
        """inject() raced against a timer; raises ResourceTimeoutError if the timer wins."""
        if timeout_ms is None:
            timeout_ms = self.default_timeout_ms
        task = asyncio.ensure_future(self.inject(url, resource_id, kind))
        self._track(task)
        done, _ = await asyncio.wait({task}, timeout=timeout_ms / 1000)
        if task in done:
            task.result()
            return
        logger.warning(
            f"Resource {resource_id} not loaded within {timeout_ms} ms",
            extra={"resource_id": resource_id, "timeout_ms": timeout_ms},
        )
        raise ResourceTimeoutError(timeout_ms, resource_id)

    async def drain(self) -> None:
        """Wait for every background fetch to settle."""
        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    async def _settle(self, url: str, resource_id: str) -> None:
        try:
            content = await self._fetch(url)
        except Exception as e:
            self.registry.mark_rejected(resource_id, str(e))
            logger.error(
                f"Failed to load resource {resource_id} from {url}: {e}",
                extra={"resource_id": resource_id},
            )
            raise ResourceLoadError(resource_id) from e
        self.registry.mark_resolved(resource_id, content)
        logger.info(
            f"Resource {resource_id} loaded",
            extra={"resource_id": resource_id},
        )

    def _track(self, task: asyncio.Task) -> None:
        self._pending.add(task)
        task.add_done_callback(self._forget)

    def _forget(self, task: asyncio.Task) -> None:
        self._pending.discard(task)
        # Marks the exception retrieved; _settle already logged it
        if not task.cancelled():
            task.exception()
