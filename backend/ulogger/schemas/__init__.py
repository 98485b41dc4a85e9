"""Pydantic Schemas — request/response models for API endpoints.

Invariants:
    - Schemas validate at system boundary (user input, API responses)
    - Numeric input fields reuse core.coercion annotated types

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
