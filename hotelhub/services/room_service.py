"""
HotelHub Backend: Room Service
===============================

What:  Business logic for rooms scoped under a hotel, plus the global room list.
How:   Every hotel-scoped operation first resolves the hotel slug to its id.
       A missing hotel raises NotFoundError("Hotel not found") before the room
       table is touched, so it always takes precedence over "Room not found".
       The room is then addressed by the compound key (slug, hotel_id).
Who:   Called by routes/rooms.py.
"""

import logging
from typing import List

from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from hotelhub.exceptions import DatabaseError, NotFoundError
from hotelhub.models.hotel import Hotel
from hotelhub.models.room import Room
from hotelhub.schemas.room import RoomCreate, RoomResponse, RoomUpdate

logger = logging.getLogger(__name__)


class RoomService:
    """Stateless room operations; each method receives the request's session."""

    async def _resolve_hotel_id(self, db: AsyncSession, hotel_slug: str) -> int:
        """
        Look up the id of the hotel with this slug.

        Raises:
            NotFoundError: no hotel has this slug
            DatabaseError: the lookup failed
        """
        try:
            result = await db.execute(select(Hotel.id).where(Hotel.slug == hotel_slug))
            hotel_id = result.scalars().first()
        except SQLAlchemyError as e:
            logger.error("Database error resolving hotel '%s': %s", hotel_slug, str(e))
            raise DatabaseError.from_exception(e, hotel_slug=hotel_slug)

        if hotel_id is None:
            raise NotFoundError(resource="Hotel", slug=hotel_slug)
        return hotel_id

    async def list_rooms(self, db: AsyncSession) -> List[RoomResponse]:
        """Return every room across all hotels."""
        try:
            result = await db.execute(select(Room))
            return [RoomResponse.model_validate(row) for row in result.scalars().all()]
        except SQLAlchemyError as e:
            logger.error("Database error listing rooms: %s", str(e))
            raise DatabaseError.from_exception(e)

    async def list_hotel_rooms(self, db: AsyncSession, hotel_slug: str) -> List[RoomResponse]:
        """Return the rooms belonging to one hotel."""
        hotel_id = await self._resolve_hotel_id(db, hotel_slug)
        try:
            result = await db.execute(select(Room).where(Room.hotel_id == hotel_id))
            return [RoomResponse.model_validate(row) for row in result.scalars().all()]
        except SQLAlchemyError as e:
            logger.error("Database error listing rooms of hotel '%s': %s", hotel_slug, str(e))
            raise DatabaseError.from_exception(e, hotel_slug=hotel_slug)

    async def get_room(
        self, db: AsyncSession, hotel_slug: str, room_slug: str
    ) -> RoomResponse:
        hotel_id = await self._resolve_hotel_id(db, hotel_slug)
        try:
            result = await db.execute(
                select(Room).where(Room.slug == room_slug, Room.hotel_id == hotel_id)
            )
            room = result.scalars().first()
        except SQLAlchemyError as e:
            logger.error("Database error fetching room '%s/%s': %s", hotel_slug, room_slug, str(e))
            raise DatabaseError.from_exception(e, hotel_slug=hotel_slug, room_slug=room_slug)

        if room is None:
            raise NotFoundError(resource="Room", slug=room_slug)
        return RoomResponse.model_validate(room)

    async def create_room(
        self, db: AsyncSession, hotel_slug: str, data: RoomCreate
    ) -> RoomResponse:
        """
        Insert a room under the hotel with this slug.

        The foreign key comes from the resolved hotel, never from the body.
        Uniqueness of (hotel_id, slug) is left to the database.
        """
        hotel_id = await self._resolve_hotel_id(db, hotel_slug)
        try:
            result = await db.execute(
                insert(Room)
                .values(hotel_id=hotel_id, **data.model_dump())
                .returning(Room)
            )
            response = RoomResponse.model_validate(result.scalar_one())
            await db.commit()
        except SQLAlchemyError as e:
            logger.error("Failed to insert room '%s' under '%s': %s", data.slug, hotel_slug, str(e))
            raise DatabaseError.from_exception(e, hotel_slug=hotel_slug, room_slug=data.slug)

        logger.info(
            "Room created: %s/%s id=%d hotel_id=%d",
            hotel_slug,
            response.slug,
            response.id,
            hotel_id,
        )
        return response

    async def update_room(
        self, db: AsyncSession, hotel_slug: str, room_slug: str, data: RoomUpdate
    ) -> RoomResponse:
        """Replace images, title and bedroom_count of one room (full replacement)."""
        hotel_id = await self._resolve_hotel_id(db, hotel_slug)
        try:
            result = await db.execute(
                update(Room)
                .where(Room.slug == room_slug, Room.hotel_id == hotel_id)
                .values(**data.model_dump())
                .returning(Room)
            )
            room = result.scalars().first()
            if room is None:
                raise NotFoundError(resource="Room", slug=room_slug)
            response = RoomResponse.model_validate(room)
            await db.commit()
        except SQLAlchemyError as e:
            logger.error("Database error updating room '%s/%s': %s", hotel_slug, room_slug, str(e))
            raise DatabaseError.from_exception(e, hotel_slug=hotel_slug, room_slug=room_slug)

        logger.info("Room updated: %s/%s id=%d", hotel_slug, room_slug, response.id)
        return response

    async def delete_room(
        self, db: AsyncSession, hotel_slug: str, room_slug: str
    ) -> RoomResponse:
        """Delete one room and return its prior state."""
        hotel_id = await self._resolve_hotel_id(db, hotel_slug)
        try:
            result = await db.execute(
                delete(Room)
                .where(Room.slug == room_slug, Room.hotel_id == hotel_id)
                .returning(Room)
            )
            room = result.scalars().first()
            if room is None:
                raise NotFoundError(resource="Room", slug=room_slug)
            response = RoomResponse.model_validate(room)
            await db.commit()
        except SQLAlchemyError as e:
            logger.error("Database error deleting room '%s/%s': %s", hotel_slug, room_slug, str(e))
            raise DatabaseError.from_exception(e, hotel_slug=hotel_slug, room_slug=room_slug)

        logger.info("Room deleted: %s/%s id=%d", hotel_slug, room_slug, response.id)
        return response


room_service = RoomService()
