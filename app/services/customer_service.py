"""Customer create-or-fetch for the inbound webhook path."""

from __future__ import annotations

from typing import Optional

from sqlalchemy.orm import Session

from app.models.customer import Customer
from app.utils.db.upsert import insert_or_ignore


class CustomerService:
    def __init__(self, db: Session) -> None:
        self.db = db

    def get_by_external_id(self, external_id: str) -> Optional[Customer]:
        return (
            self.db.query(Customer).filter(Customer.external_id == external_id).first()
        )

    def upsert_customer(
        self, external_id: str, display_name: Optional[str] = None
    ) -> Customer:
        """Get the customer for a provider user id, creating it on first contact.

        display_name is fill-once, like the conversation fields.
        """
        insert_or_ignore(
            self.db,
            Customer,
            {"external_id": external_id, "display_name": display_name, "metadata": {}},
            index_elements=["external_id"],
        )
        customer = self.get_by_external_id(external_id)
        if not customer.display_name and display_name:
            customer.display_name = display_name
            self.db.commit()
            self.db.refresh(customer)
        return customer
