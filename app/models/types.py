"""Column types portable between PostgreSQL and SQLite."""

from sqlalchemy import JSON
from sqlalchemy.dialects.postgresql import JSONB

# JSONB in production, plain JSON elsewhere (tests run on SQLite)
JSONType = JSON().with_variant(JSONB(), "postgresql")
