"""
HotelHub Backend: Hotel Route Handlers
=======================================

What:  POST/GET /hotel and GET/PUT/DELETE /hotel/{slug}.
How:   Extracts form fields, files, path params and JSON bodies, delegates to
       HotelService, and returns the record. Errors are raised as application
       exceptions and formatted by the global handlers in main.py.

POST /hotel is multipart/form-data: scalar fields as form fields, structured
documents (amenities, host_information) as JSON strings, and up to
settings.max_images files under the repeated `images` field.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile
from sqlalchemy.ext.asyncio import AsyncSession

from hotelhub.database import get_db_session
from hotelhub.schemas.common import ErrorResponse, NotFoundResponse
from hotelhub.schemas.hotel import HotelCreate, HotelResponse, HotelUpdate
from hotelhub.services.hotel_service import hotel_service
from hotelhub.services.upload_service import UploadSink, get_upload_sink

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/hotel", tags=["Hotels"])


@router.post(
    "",
    status_code=201,
    response_model=HotelResponse,
    responses={
        400: {"description": "Slug or title missing, or too many images", "model": ErrorResponse},
        500: {"description": "Upload or database failure", "model": ErrorResponse},
    },
    summary="Create a hotel with optional image uploads",
)
async def create_hotel(
    request: Request,
    slug: Optional[str] = Form(None),
    title: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    guest_count: Optional[int] = Form(None),
    bedroom_count: Optional[int] = Form(None),
    bathroom_count: Optional[int] = Form(None),
    amenities: Optional[str] = Form(None, description="JSON document"),
    host_information: Optional[str] = Form(None, description="JSON document"),
    address: Optional[str] = Form(None),
    latitude: Optional[float] = Form(None),
    longitude: Optional[float] = Form(None),
    images: Optional[List[UploadFile]] = File(None, description="Up to 10 image files"),
    db: AsyncSession = Depends(get_db_session),
    upload_sink: UploadSink = Depends(get_upload_sink),
) -> HotelResponse:
    data = HotelCreate(
        slug=slug,
        title=title,
        description=description,
        guest_count=guest_count,
        bedroom_count=bedroom_count,
        bathroom_count=bathroom_count,
        amenities=amenities,
        host_information=host_information,
        address=address,
        latitude=latitude,
        longitude=longitude,
    )
    files = images or []

    logger.info("Received hotel create: slug=%s files=%d", slug, len(files))

    try:
        return await hotel_service.create_hotel(
            db=db,
            upload_sink=upload_sink,
            data=data,
            images=files,
            max_images=request.app.state.settings.max_images,
        )
    finally:
        for upload in files:
            await upload.close()


@router.get(
    "",
    response_model=List[HotelResponse],
    responses={500: {"description": "Database failure", "model": ErrorResponse}},
    summary="List all hotels",
)
async def list_hotels(db: AsyncSession = Depends(get_db_session)) -> List[HotelResponse]:
    return await hotel_service.list_hotels(db)


@router.get(
    "/{slug}",
    response_model=HotelResponse,
    responses={
        404: {"description": "Hotel not found", "model": NotFoundResponse},
        500: {"description": "Database failure", "model": ErrorResponse},
    },
    summary="Get a hotel by slug",
)
async def get_hotel(slug: str, db: AsyncSession = Depends(get_db_session)) -> HotelResponse:
    return await hotel_service.get_hotel(db, slug)


@router.put(
    "/{slug}",
    response_model=HotelResponse,
    responses={
        404: {"description": "Hotel not found", "model": NotFoundResponse},
        500: {"description": "Database failure", "model": ErrorResponse},
    },
    summary="Replace a hotel's fields",
    description="Full replacement: omitted fields are stored as null.",
)
async def update_hotel(
    slug: str,
    payload: Optional[HotelUpdate] = None,
    db: AsyncSession = Depends(get_db_session),
) -> HotelResponse:
    return await hotel_service.update_hotel(db, slug, payload or HotelUpdate())


@router.delete(
    "/{slug}",
    response_model=HotelResponse,
    responses={
        404: {"description": "Hotel not found", "model": NotFoundResponse},
        500: {"description": "Database failure", "model": ErrorResponse},
    },
    summary="Delete a hotel and return its prior state",
)
async def delete_hotel(slug: str, db: AsyncSession = Depends(get_db_session)) -> HotelResponse:
    return await hotel_service.delete_hotel(db, slug)
