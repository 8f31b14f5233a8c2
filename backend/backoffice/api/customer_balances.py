"""
Customer Balances API Endpoints
"""
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Query
from supabase import Client

from backoffice.api.deps import get_business_id, store_failure
from backoffice.core.database import get_supabase
from backoffice.core.exceptions import InvalidRequestError, StoreError
from backoffice.repositories.customer_balance_repository import CustomerBalanceRepository
from backoffice.services.balance_service import BalanceService

router = APIRouter(prefix="/customer-balances", tags=["Customer Balances"])


@router.get("")
def get_customer_balance(
    business_id: str = Depends(get_business_id),
    customer_id: Optional[str] = Query(None, description="Customer whose balance to fetch"),
    client: Client = Depends(get_supabase),
):
    """Get a customer's balance (null when the customer has none)"""
    if not customer_id:
        raise HTTPException(status_code=400, detail="Missing customer_id")

    try:
        balance = CustomerBalanceRepository(client).find_by_customer(business_id, customer_id)
    except StoreError as e:
        raise store_failure(e, "Failed to fetch customer balance")

    return {"success": True, "data": balance.to_dict() if balance else None}


@router.post("")
def adjust_customer_balance(
    business_id: str = Depends(get_business_id),
    payload: Any = Body(None),
    client: Client = Depends(get_supabase),
):
    """
    Add a signed amount to a customer's balance

    Body: {customer_id, amount}. Positive charges, negative pays down.
    """
    try:
        balance = BalanceService(client).adjust(business_id, payload)
    except InvalidRequestError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except StoreError as e:
        raise store_failure(e, "Failed to adjust balance")

    return {"success": True, "data": balance.to_dict()}
