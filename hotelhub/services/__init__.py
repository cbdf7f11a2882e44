# Services package init
"""
HotelHub Backend: Services Layer
=================================

What:  Business logic layer sitting between routes (HTTP) and database (persistence).
How:   Services accept a session (and collaborators) per call, apply the
       presence checks and slug resolution, run one statement, and return
       response schemas or raise application exceptions.

Service Inventory:
    - UploadSink:   Durable storage for uploaded image files
    - HotelService: Hotel create / list / get / update / delete
    - RoomService:  Room listing and hotel-scoped CRUD
"""
