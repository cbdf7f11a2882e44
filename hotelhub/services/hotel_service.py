"""
HotelHub Backend: Hotel Service
================================

What:  Business logic for the hotel resource: create, list, get, update, delete.
How:   Each operation is validate → (store uploads) → one SQL statement →
       map the row to HotelResponse. Writes use RETURNING so the response is
       the row exactly as the database stored it.
Who:   Called by routes/hotels.py.

Error Handling Strategy:
    - Missing slug/title or too many files → ValidationError (400), before any
      file or row is written
    - Zero rows matched by slug → NotFoundError (404)
    - Any SQLAlchemyError → DatabaseError (500) carrying the driver message
    - Upload failures surface as FileStorageError (500) from the sink

Upload / insert ordering:
    Files are written only after the presence check passes. If the INSERT
    then fails (duplicate slug, bad column value, lost connection), the files
    written for this request are removed before the error propagates.
"""

import logging
from typing import List, Sequence

from fastapi import UploadFile
from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from hotelhub.exceptions import DatabaseError, NotFoundError, ValidationError
from hotelhub.models.hotel import Hotel
from hotelhub.schemas.hotel import HotelCreate, HotelResponse, HotelUpdate
from hotelhub.services.upload_service import UploadSink

logger = logging.getLogger(__name__)


class HotelService:
    """
    Stateless hotel operations. Every method receives the request's session
    (and, for creation, the upload sink) as arguments.
    """

    async def create_hotel(
        self,
        db: AsyncSession,
        upload_sink: UploadSink,
        data: HotelCreate,
        images: Sequence[UploadFile] = (),
        max_images: int = 10,
    ) -> HotelResponse:
        """
        Create a hotel from form fields plus uploaded image files.

        Workflow:
            1. Presence check on slug and title
            2. Image count check
            3. Store files through the upload sink (arrival order preserved)
            4. INSERT ... RETURNING with the image paths as a JSON list
            5. Commit and return the created record

        Raises:
            ValidationError: slug/title missing, or more than max_images files
            FileStorageError: the upload sink could not write
            DatabaseError: the INSERT or commit failed
        """
        if not data.slug or not data.title:
            raise ValidationError(
                message="Slug and title are required",
                context={"slug": data.slug, "title": data.title},
            )

        if len(images) > max_images:
            raise ValidationError(
                message=f"Too many images: at most {max_images} files may be uploaded",
                field="images",
                context={"received": len(images), "max_images": max_images},
            )

        image_paths = await upload_sink.store_all(images)

        values = data.model_dump()
        values["images"] = image_paths

        try:
            result = await db.execute(insert(Hotel).values(**values).returning(Hotel))
            hotel = HotelResponse.model_validate(result.scalar_one())
            await db.commit()
        except SQLAlchemyError as e:
            logger.error("Failed to insert hotel '%s': %s", data.slug, str(e))
            # Compensate: these files would otherwise be orphaned
            await upload_sink.cleanup(image_paths)
            raise DatabaseError.from_exception(e, slug=data.slug)

        logger.info(
            "Hotel created: slug=%s id=%d images=%d",
            hotel.slug,
            hotel.id,
            len(image_paths),
        )
        return hotel

    async def list_hotels(self, db: AsyncSession) -> List[HotelResponse]:
        """Return every hotel in storage-default order."""
        try:
            result = await db.execute(select(Hotel))
            return [HotelResponse.model_validate(row) for row in result.scalars().all()]
        except SQLAlchemyError as e:
            logger.error("Database error listing hotels: %s", str(e))
            raise DatabaseError.from_exception(e)

    async def get_hotel(self, db: AsyncSession, slug: str) -> HotelResponse:
        """
        Return the hotel with this slug.

        Raises:
            NotFoundError: no hotel has this slug
            DatabaseError: the query failed
        """
        try:
            result = await db.execute(select(Hotel).where(Hotel.slug == slug))
            hotel = result.scalars().first()
        except SQLAlchemyError as e:
            logger.error("Database error fetching hotel '%s': %s", slug, str(e))
            raise DatabaseError.from_exception(e, slug=slug)

        if hotel is None:
            raise NotFoundError(resource="Hotel", slug=slug)
        return HotelResponse.model_validate(hotel)

    async def update_hotel(
        self, db: AsyncSession, slug: str, data: HotelUpdate
    ) -> HotelResponse:
        """
        Replace every updatable field of the hotel with this slug.

        Fields missing from `data` are written as NULL; the stored row is
        never merged with the request.
        """
        try:
            result = await db.execute(
                update(Hotel)
                .where(Hotel.slug == slug)
                .values(**data.model_dump())
                .returning(Hotel)
            )
            hotel = result.scalars().first()
            if hotel is None:
                raise NotFoundError(resource="Hotel", slug=slug)
            response = HotelResponse.model_validate(hotel)
            await db.commit()
        except SQLAlchemyError as e:
            logger.error("Database error updating hotel '%s': %s", slug, str(e))
            raise DatabaseError.from_exception(e, slug=slug)

        logger.info("Hotel updated: slug=%s id=%d", response.slug, response.id)
        return response

    async def delete_hotel(self, db: AsyncSession, slug: str) -> HotelResponse:
        """Delete the hotel with this slug and return its prior state."""
        try:
            result = await db.execute(
                delete(Hotel).where(Hotel.slug == slug).returning(Hotel)
            )
            hotel = result.scalars().first()
            if hotel is None:
                raise NotFoundError(resource="Hotel", slug=slug)
            response = HotelResponse.model_validate(hotel)
            await db.commit()
        except SQLAlchemyError as e:
            logger.error("Database error deleting hotel '%s': %s", slug, str(e))
            raise DatabaseError.from_exception(e, slug=slug)

        logger.info("Hotel deleted: slug=%s id=%d", response.slug, response.id)
        return response


hotel_service = HotelService()
