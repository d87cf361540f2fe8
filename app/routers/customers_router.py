"""Customers API: list and get, gated by the staff role."""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from app.routers.utils.dependencies import get_customer_abilities
from app.schemas.chat import CustomerRead
from app.services.abilities import CustomerAbilities

customers_router = APIRouter(prefix="/customers", tags=["Customer"])


@customers_router.get("", response_model=List[CustomerRead])
def list_customers(
    id: Optional[List[int]] = Query(None),
    external_id: Optional[List[str]] = Query(None),
    limit: Optional[int] = Query(None),
    offset: Optional[int] = Query(None),
    abilities: CustomerAbilities = Depends(get_customer_abilities),
) -> List[CustomerRead]:
    customers = abilities.get_customers(
        id=id, external_id=external_id, limit=limit, offset=offset
    )
    return [CustomerRead.model_validate(c) for c in customers]


@customers_router.get("/{customer_id}", response_model=CustomerRead)
def get_customer(
    customer_id: int,
    abilities: CustomerAbilities = Depends(get_customer_abilities),
) -> CustomerRead:
    customer = abilities.get_customer_by_id(customer_id)
    if customer is None:
        raise HTTPException(status_code=404, detail="Customer not found")
    return CustomerRead.model_validate(customer)
