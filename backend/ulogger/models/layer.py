"""Map Layer ORM — tile source offered in the map layer switcher.

Invariants:
    - Layers are listed by ascending priority, then id
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from ulogger.db.base import Base


class Layer(Base):
    __tablename__ = "ol_layers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(50), nullable=False)
    url: Mapped[str] = mapped_column(String(255), nullable=False)
    priority: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
