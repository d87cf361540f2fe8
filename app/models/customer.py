"""Customer model: end users reaching us through the messaging provider."""

from __future__ import annotations

from sqlalchemy import Column, Integer, String

from app.db import Base
from app.models.mixins import TimestampMixin
from app.models.types import JSONType


class Customer(Base, TimestampMixin):
    __tablename__ = "customers"

    id = Column(Integer, primary_key=True, autoincrement=True)
    external_id = Column(String(255), unique=True, nullable=True)  # provider user id
    display_name = Column(String(255), nullable=True)
    metadata_ = Column("metadata", JSONType, nullable=False, default=dict)
