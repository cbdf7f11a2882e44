"""
HotelHub Backend: Application Package
======================================

CRUD HTTP service for hotels and the rooms they contain, with image uploads
written to disk and referenced by path.

Layers:
    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← Presence checks, slug resolution
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │   Database handle / Upload sink     │  ← Built once per process
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
