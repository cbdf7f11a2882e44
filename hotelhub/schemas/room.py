"""
HotelHub Backend: Room Request/Response Schemas
================================================

Rooms are always addressed through their parent hotel's slug in the URL;
`hotel_id` is never accepted from the client.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field


class RoomCreate(BaseModel):
    """Body of POST /hotel/{hotel_slug}/room."""
    slug: Optional[str] = None
    images: Optional[Any] = None
    title: Optional[str] = None
    bedroom_count: Optional[int] = None


class RoomUpdate(BaseModel):
    """Body of PUT /hotel/{hotel_slug}/room/{room_slug} (full replacement)."""
    images: Optional[Any] = None
    title: Optional[str] = None
    bedroom_count: Optional[int] = None


class RoomResponse(BaseModel):
    """Full room record as stored."""
    id: int = Field(description="Database-assigned numeric id")
    hotel_id: int = Field(description="Id of the owning hotel")
    slug: str = Field(description="Identifier, unique within the hotel")
    images: Optional[Any] = None
    title: Optional[str] = None
    bedroom_count: Optional[int] = None

    model_config = {"from_attributes": True}
