"""Staff-scoped access to customers."""

from __future__ import annotations

from typing import List, Optional, Sequence, Union

from sqlalchemy.orm import Session

from app.models.customer import Customer
from app.models.staff import Staff
from app.services.abilities.helpers import normalize_pages
from app.services.abilities.rules import can_view_customers


def _as_list(value) -> list:
    if isinstance(value, (list, tuple, set, frozenset)):
        return list(value)
    return [value]


class CustomerAbilities:
    def __init__(self, db: Session, staff: Staff) -> None:
        self.db = db
        self.staff = staff

    def get_customers(
        self,
        id: Union[int, Sequence[int], None] = None,
        external_id: Union[str, Sequence[str], None] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> List[Customer]:
        """Customers matching any of the given ids; [] if I can't view customers."""
        if not can_view_customers(self.staff):
            return []

        pages = normalize_pages(limit, offset)
        query = self.db.query(Customer)
        if id is not None:
            query = query.filter(Customer.id.in_(_as_list(id)))
        if external_id is not None:
            query = query.filter(Customer.external_id.in_(_as_list(external_id)))
        return (
            query.order_by(Customer.id.desc())
            .offset(pages.offset)
            .limit(pages.limit)
            .all()
        )

    def get_customer_by_id(self, customer_id: int) -> Optional[Customer]:
        found = self.get_customers(id=customer_id, offset=0, limit=1)
        return found[0] if found else None
