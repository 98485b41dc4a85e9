"""Infrastructure Layer — database sessions, HTTP fetching, and logging setup.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Library exceptions are mapped or logged at this boundary

Design Decisions:
    - Thin wrappers over raw clients so services receive plain callables
"""
