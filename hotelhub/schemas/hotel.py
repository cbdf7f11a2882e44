"""
HotelHub Backend: Hotel Request/Response Schemas
=================================================

What:  Pydantic models defining the hotel API contract.
How:   FastAPI validates JSON bodies against these models, and services build
       responses from ORM rows via `from_attributes`.

Structured documents (`images`, `amenities`, `host_information`) are typed
as `Any`: any JSON value is accepted and returned as stored.
"""

import json
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def parse_document(value: Any) -> Any:
    """
    Decode a structured document sent as a multipart form string.

    Valid JSON becomes the decoded value; anything else is kept as a plain
    string so it is stored as a JSON string scalar. NaN and Infinity are
    not JSON and stay strings.
    """
    if isinstance(value, str):
        try:
            return json.loads(value, parse_constant=_reject_constant)
        except ValueError:
            return value
    return value


class HotelCreate(BaseModel):
    """
    Fields accepted by POST /hotel (multipart form, besides the image files).

    Every field is optional at the schema level; the presence check for
    slug and title happens in HotelService so the client gets the API's own
    400 body rather than a schema error.
    """
    slug: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    guest_count: Optional[int] = None
    bedroom_count: Optional[int] = None
    bathroom_count: Optional[int] = None
    amenities: Optional[Any] = None
    host_information: Optional[Any] = None
    address: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    @field_validator("amenities", "host_information", mode="before")
    @classmethod
    def decode_documents(cls, v: Any) -> Any:
        return parse_document(v)


class HotelUpdate(BaseModel):
    """
    Replacement field set for PUT /hotel/{slug}.

    This is a full replacement: any field the client leaves out is written as
    NULL. There is no merge with the stored row.
    """
    images: Optional[Any] = None
    title: Optional[str] = None
    description: Optional[str] = None
    guest_count: Optional[int] = None
    bedroom_count: Optional[int] = None
    bathroom_count: Optional[int] = None
    amenities: Optional[Any] = None
    host_information: Optional[Any] = None
    address: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None


class HotelResponse(BaseModel):
    """Full hotel record as stored, including the database-assigned id."""
    id: int = Field(description="Database-assigned numeric id")
    slug: str = Field(description="Unique, externally assigned identifier")
    images: Optional[Any] = Field(default=None, description="Ordered list of upload paths")
    title: str
    description: Optional[str] = None
    guest_count: Optional[int] = None
    bedroom_count: Optional[int] = None
    bathroom_count: Optional[int] = None
    amenities: Optional[Any] = None
    host_information: Optional[Any] = None
    address: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    model_config = {"from_attributes": True}
