"""Track ORM — named sequence of positions recorded by one user.

Invariants:
    - Always belongs to a User (user_id FK)
    - Deleting a track deletes its positions
"""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ulogger.db.base import Base


class Track(Base):
    __tablename__ = "tracks"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    comment: Mapped[str | None] = mapped_column(String(1024), nullable=True)

    user: Mapped["User"] = relationship("User", back_populates="tracks")
    positions: Mapped[list["Position"]] = relationship(
        "Position", back_populates="track", cascade="all, delete-orphan",
        order_by="Position.time",
    )
