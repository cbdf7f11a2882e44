# Models package init
"""
HotelHub Backend: ORM Models
=============================

Importing this package registers every table on `Base.metadata`.

    - hotel.py: Hotel  (table `hotel`)
    - room.py:  Room   (table `room`, FK → hotel.id)
"""

from hotelhub.models.hotel import Hotel
from hotelhub.models.room import Room

__all__ = ["Hotel", "Room"]
