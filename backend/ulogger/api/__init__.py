"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return structured JSON responses (except the asset head fragment)

Design Decisions:
    - Thin routes delegate to services and core helpers
"""
