"""
HotelHub Backend: Room Route Handlers
======================================

What:  GET /room (all rooms) and the hotel-scoped room routes under
       /hotel/{hotel_slug}/room.
How:   Thin handlers that pass path params and JSON bodies to RoomService.
       A missing body counts as an empty object, so the hotel lookup still runs.
       A missing parent hotel yields 404 {"message": "Hotel not found"}; a
       missing room under an existing hotel yields "Room not found".
"""

from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from hotelhub.database import get_db_session
from hotelhub.schemas.common import ErrorResponse, NotFoundResponse
from hotelhub.schemas.room import RoomCreate, RoomResponse, RoomUpdate
from hotelhub.services.room_service import room_service

router = APIRouter(tags=["Rooms"])

_NOT_FOUND = {"description": "Hotel or room not found", "model": NotFoundResponse}
_SERVER_ERROR = {"description": "Database failure", "model": ErrorResponse}


@router.get(
    "/room",
    response_model=List[RoomResponse],
    responses={500: _SERVER_ERROR},
    summary="List every room across all hotels",
)
async def list_rooms(db: AsyncSession = Depends(get_db_session)) -> List[RoomResponse]:
    return await room_service.list_rooms(db)


@router.get(
    "/hotel/{hotel_slug}/room",
    response_model=List[RoomResponse],
    responses={404: _NOT_FOUND, 500: _SERVER_ERROR},
    summary="List the rooms of one hotel",
)
async def list_hotel_rooms(
    hotel_slug: str,
    db: AsyncSession = Depends(get_db_session),
) -> List[RoomResponse]:
    return await room_service.list_hotel_rooms(db, hotel_slug)


@router.get(
    "/hotel/{hotel_slug}/room/{room_slug}",
    response_model=RoomResponse,
    responses={404: _NOT_FOUND, 500: _SERVER_ERROR},
    summary="Get one room of a hotel",
)
async def get_room(
    hotel_slug: str,
    room_slug: str,
    db: AsyncSession = Depends(get_db_session),
) -> RoomResponse:
    return await room_service.get_room(db, hotel_slug, room_slug)


@router.post(
    "/hotel/{hotel_slug}/room",
    status_code=201,
    response_model=RoomResponse,
    responses={404: _NOT_FOUND, 500: _SERVER_ERROR},
    summary="Create a room under a hotel",
)
async def create_room(
    hotel_slug: str,
    payload: Optional[RoomCreate] = None,
    db: AsyncSession = Depends(get_db_session),
) -> RoomResponse:
    return await room_service.create_room(db, hotel_slug, payload or RoomCreate())


@router.put(
    "/hotel/{hotel_slug}/room/{room_slug}",
    response_model=RoomResponse,
    responses={404: _NOT_FOUND, 500: _SERVER_ERROR},
    summary="Replace a room's images, title and bedroom count",
)
async def update_room(
    hotel_slug: str,
    room_slug: str,
    payload: Optional[RoomUpdate] = None,
    db: AsyncSession = Depends(get_db_session),
) -> RoomResponse:
    return await room_service.update_room(db, hotel_slug, room_slug, payload or RoomUpdate())


@router.delete(
    "/hotel/{hotel_slug}/room/{room_slug}",
    response_model=RoomResponse,
    responses={404: _NOT_FOUND, 500: _SERVER_ERROR},
    summary="Delete a room and return its prior state",
)
async def delete_room(
    hotel_slug: str,
    room_slug: str,
    db: AsyncSession = Depends(get_db_session),
) -> RoomResponse:
    return await room_service.delete_room(db, hotel_slug, room_slug)
