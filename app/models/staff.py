"""Staff model: authenticated internal users. Owned by the auth subsystem."""

from __future__ import annotations

from sqlalchemy import Column, Integer, String

from app.constants.chat import StaffRole
from app.db import Base
from app.models.mixins import TimestampMixin


class Staff(Base, TimestampMixin):
    """An internal user; `role` bounds which conversations they can see."""

    __tablename__ = "staff"

    id = Column(Integer, primary_key=True, autoincrement=True)
    external_id = Column(String(255), unique=True, nullable=True)
    display_name = Column(String(255), nullable=False, default="")
    role = Column(String(32), nullable=False, default=StaffRole.MEMBER.value)
