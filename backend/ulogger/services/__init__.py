"""Services Layer — async orchestration around the pure core.

Invariants:
    - Services may await IO (DB sessions, resource fetches); core/ never does
    - Every failure is raised to the caller as a ULoggerError subclass

Design Decisions:
    - One file per concern for locality: loader, position feed, config, map assets
"""
