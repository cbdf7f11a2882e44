"""
HotelHub Backend: Room SQLAlchemy Model
========================================

What:  ORM model representing the `room` table.

A room belongs to exactly one hotel. Its slug is only unique within that
hotel, so the natural key is (hotel_id, slug); two hotels may both have a
room "101". Deleting a hotel cascades to its rooms at the database level.
"""

from typing import Any, Optional

from sqlalchemy import ForeignKey, Index, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from hotelhub.database import Base
from hotelhub.models.types import Document


class Room(Base):
    """A room scoped under a parent hotel."""

    __tablename__ = "room"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    hotel_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("hotel.id", ondelete="CASCADE"),
        nullable=False,
    )

    slug: Mapped[str] = mapped_column(String(255), nullable=False)

    # Paths or URLs; stored as given
    images: Mapped[Optional[Any]] = mapped_column(Document, nullable=True)

    title: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    bedroom_count: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    __table_args__ = (
        UniqueConstraint("hotel_id", "slug", name="uq_room_hotel_id_slug"),
        # Serves GET /hotel/{slug}/room
        Index("idx_room_hotel_id", "hotel_id"),
    )

    def __repr__(self) -> str:
        return f"<Room(id={self.id}, hotel_id={self.hotel_id}, slug='{self.slug}')>"
