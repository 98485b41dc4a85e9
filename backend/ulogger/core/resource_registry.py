"""Resource Registry — identifier -> load state of injected scripts and stylesheets.

Invariants:
    - Append-only: an identifier is registered at most once and never removed
    - State transitions: LOADING -> RESOLVED | REJECTED (settled states are final)
    - Presence, not state, answers "already injected?" (a LOADING entry counts)

Design Decisions:
    - Explicit object owned by a loader instance instead of a process-global
      namespace: each test builds its own registry
"""

from dataclasses import dataclass
from enum import Enum


class ResourceKind(str, Enum):
    SCRIPT = "script"
    STYLESHEET = "stylesheet"


class LoadState(str, Enum):
    LOADING = "loading"
    RESOLVED = "resolved"
    REJECTED = "rejected"


@dataclass
class LoadedResource:
    """One injected resource."""
    resource_id: str
    url: str
    kind: ResourceKind
    state: LoadState = LoadState.LOADING
    content: bytes | None = None
    error: str | None = None

    def to_dict(self) -> dict:
        return {
            "id": self.resource_id,
            "url": self.url,
            "kind": self.kind.value,
            "state": self.state.value,
            "size": len(self.content) if self.content is not None else None,
            "error": self.error,
        }


class ResourceRegistry:
    """Registry of injected resources keyed by identifier."""

    def __init__(self):
        self._resources: dict[str, LoadedResource] = {}

    def __contains__(self, resource_id: str) -> bool:
        return resource_id in self._resources

    def __len__(self) -> int:
        return len(self._resources)

    def get(self, resource_id: str) -> LoadedResource | None:
        return self._resources.get(resource_id)

    def register(self, resource_id: str, url: str, kind: ResourceKind) -> LoadedResource:
        if resource_id in self._resources:
            raise ValueError(f"resource '{resource_id}' already registered")
        resource = LoadedResource(resource_id=resource_id, url=url, kind=kind)
        self._resources[resource_id] = resource
        return resource

    def mark_resolved(self, resource_id: str, content: bytes | None = None) -> None:
        resource = self._resources[resource_id]
        if resource.state is LoadState.LOADING:
            resource.state = LoadState.RESOLVED
            resource.content = content

    def mark_rejected(self, resource_id: str, error: str) -> None:
        resource = self._resources[resource_id]
        if resource.state is LoadState.LOADING:
            resource.state = LoadState.REJECTED
            resource.error = error

    def snapshot(self) -> list[dict]:
        return [r.to_dict() for r in self._resources.values()]
