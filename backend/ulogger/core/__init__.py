"""Core Layer — pure domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - All functions are pure and deterministic (ambient locale is injected)

Design Decisions:
    - Functional core separated from imperative shell: the resource loader
      lives in services/ because it awaits IO; its registry lives here
"""
