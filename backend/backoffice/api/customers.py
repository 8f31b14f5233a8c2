"""
Customers API Endpoints
Customer listing/creation and the overdue-customers report
"""
from decimal import Decimal
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Query
from supabase import Client

from backoffice.api.deps import get_business_id, store_failure
from backoffice.core.database import get_supabase
from backoffice.core.exceptions import StoreError
from backoffice.core.validation import is_number
from backoffice.repositories.customer_repository import CustomerRepository

router = APIRouter(prefix="/customers", tags=["Customers"])


@router.get("")
def get_customers(
    business_id: str = Depends(get_business_id),
    id: Optional[str] = Query(None, description="Fetch a single customer"),
    client: Client = Depends(get_supabase),
):
    """
    Get the business's customers, or one by id (null when not found)
    """
    repo = CustomerRepository(client)

    try:
        if id:
            customer = repo.find_by_id(business_id, id)
            data = customer.to_dict() if customer else None
        else:
            data = [customer.to_dict() for customer in repo.find_by_business(business_id)]
    except StoreError as e:
        raise store_failure(e, "Failed to fetch customers")

    return {"success": True, "data": data}


@router.post("", status_code=201)
def create_customer(
    business_id: str = Depends(get_business_id),
    payload: Any = Body(None),
    client: Client = Depends(get_supabase),
):
    """
    Create a customer

    Its balance row (balance = 0) is created in the same store transaction.
    """
    if not isinstance(payload, dict):
        payload = {}

    name = payload.get("name")
    credit_limit = payload.get("credit_limit")

    if not name or credit_limit is None:
        raise HTTPException(status_code=400, detail="Missing name or credit_limit")
    if not is_number(credit_limit):
        raise HTTPException(status_code=400, detail="credit_limit must be a number")

    try:
        customer = CustomerRepository(client).create(
            business_id, str(name), Decimal(str(credit_limit))
        )
    except StoreError as e:
        raise store_failure(e, "Failed to create customer")

    return {"success": True, "data": customer.to_dict()}


@router.get("/overdue")
def get_overdue_customers(
    business_id: str = Depends(get_business_id),
    days: int = Query(30, ge=0, description="Minimum age in days of the oldest order"),
    client: Client = Depends(get_supabase),
):
    """
    Customers with a positive balance whose oldest order is older than `days`
    """
    try:
        overdue = CustomerRepository(client).find_overdue(business_id, days)
    except StoreError as e:
        raise store_failure(e, "Failed to fetch overdue customers")

    return {"success": True, "data": [row.to_dict() for row in overdue]}
