"""ORM Models — SQLAlchemy declarative models for the track store.

Invariants:
    - All models inherit from Base (db/base.py)
    - User owns tracks; a track owns its positions

Design Decisions:
    - One file per table for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from ulogger.models.user import User  # noqa: F401
from ulogger.models.track import Track  # noqa: F401
from ulogger.models.position import Position  # noqa: F401
from ulogger.models.config_entry import ConfigEntry  # noqa: F401
from ulogger.models.layer import Layer  # noqa: F401
