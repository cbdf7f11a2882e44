# Routes package init
"""
HotelHub Backend: API Routes Package
=====================================

Route Inventory:
    - hotels.py:  POST/GET /hotel, GET/PUT/DELETE /hotel/{slug}
    - rooms.py:   GET /room, GET/POST /hotel/{hotel_slug}/room,
                  GET/PUT/DELETE /hotel/{hotel_slug}/room/{room_slug}
    - health.py:  GET /health

Routes stay thin: they pull data out of the request, call a service, and
return its result. Status codes for failures come from the exception
handlers in main.py.
"""
