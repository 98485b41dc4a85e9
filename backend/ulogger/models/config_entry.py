"""Config ORM — key/value application settings editable at runtime.

Invariants:
    - name is the primary key; value is stored as text
"""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from ulogger.db.base import Base


class ConfigEntry(Base):
    __tablename__ = "config"

    name: Mapped[str] = mapped_column(String(20), primary_key=True)
    value: Mapped[str] = mapped_column(Text, nullable=False)
