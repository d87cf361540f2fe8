from typing import Optional

from fastapi import Depends, Header, HTTPException
from sqlalchemy.orm import Session

from app.commands.base_sunshine import BaseSunshineCommand
from app.db import get_db
from app.models.staff import Staff
from app.services.abilities import Abilities, CustomerAbilities
from app.services.message_dispatcher import MessageDispatcher

STAFF_HEADER = "X-Staff-Id"


def get_current_staff(
    x_staff_id: Optional[int] = Header(default=None, alias=STAFF_HEADER),
    db: Session = Depends(get_db),
) -> Staff:
    """FastAPI dependency resolving the staff member authenticated upstream."""
    if x_staff_id is None:
        raise HTTPException(status_code=401, detail="Missing staff principal")
    staff = db.query(Staff).filter(Staff.id == x_staff_id).first()
    if staff is None:
        raise HTTPException(status_code=401, detail="Unknown staff principal")
    return staff


def get_abilities(
    staff: Staff = Depends(get_current_staff),
    db: Session = Depends(get_db),
) -> Abilities:
    """FastAPI dependency building the staff-scoped facade for this request."""
    dispatcher = MessageDispatcher(
        db, adapter=BaseSunshineCommand.get_sunshine_adapter()
    )
    return Abilities(db, staff, dispatcher=dispatcher)


def get_customer_abilities(
    staff: Staff = Depends(get_current_staff),
    db: Session = Depends(get_db),
) -> CustomerAbilities:
    return CustomerAbilities(db, staff)
