"""User ORM — account that owns tracks.

Invariants:
    - login is unique and non-nullable
    - password holds a hash produced outside this package (auth is external)
"""

from sqlalchemy import Boolean, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ulogger.db.base import Base


class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    login: Mapped[str] = mapped_column(String(15), nullable=False, unique=True)
    password: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    admin: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    tracks: Mapped[list["Track"]] = relationship(
        "Track", back_populates="user", cascade="all, delete-orphan",
    )
