"""
HotelHub Backend: Hotel SQLAlchemy Model
=========================================

What:  ORM model representing the `hotel` table.
Who:   Used by HotelService for CRUD statements and by RoomService to
       resolve a hotel slug to its id.

Table Design:
    - id: Integer primary key assigned by the database
    - slug: Externally assigned identity, unique (enforced by the database,
      not by the service layer)
    - amenities / host_information / images: Opaque structured documents.
      JSONB on PostgreSQL, generic JSON elsewhere; no shape is enforced.
    - latitude / longitude: NUMERIC, surfaced to Python as float
"""

from typing import Any, Optional

from sqlalchemy import Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from hotelhub.database import Base
from hotelhub.models.types import Document


class Hotel(Base):
    """A hotel listing, addressed in the API by its slug."""

    __tablename__ = "hotel"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    slug: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)

    # Ordered list of upload paths, in the order files arrived
    images: Mapped[Optional[Any]] = mapped_column(Document, nullable=True)

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    guest_count: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    bedroom_count: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    bathroom_count: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    amenities: Mapped[Optional[Any]] = mapped_column(Document, nullable=True)
    host_information: Mapped[Optional[Any]] = mapped_column(Document, nullable=True)

    address: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # asdecimal=False: plain floats in Python, NUMERIC in the database
    latitude: Mapped[Optional[float]] = mapped_column(
        Numeric(9, 6, asdecimal=False), nullable=True
    )
    longitude: Mapped[Optional[float]] = mapped_column(
        Numeric(9, 6, asdecimal=False), nullable=True
    )

    def __repr__(self) -> str:
        return f"<Hotel(id={self.id}, slug='{self.slug}')>"
