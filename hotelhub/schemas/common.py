"""
HotelHub Backend: Shared Response Schemas
==========================================

Error shapes documented in OpenAPI. They differ per status class:
    400 / 500 → {"error": "..."}
    404       → {"message": "..."}
"""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Body of 400 and 500 responses."""
    error: str = Field(description="Error description; raw backend text for 500s")


class NotFoundResponse(BaseModel):
    """Body of 404 responses."""
    message: str = Field(description="e.g. 'Hotel not found' or 'Room not found'")


class HealthResponse(BaseModel):
    """Health check response showing service and database status."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
