"""Column types shared by the ORM models."""

from sqlalchemy import JSON
from sqlalchemy.dialects.postgresql import JSONB

# Structured document column: JSONB on PostgreSQL, JSON (TEXT-backed) elsewhere
Document = JSON().with_variant(JSONB(), "postgresql")
