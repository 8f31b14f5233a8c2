"""
Orders API Endpoints
Read-only: orders are only created through /purchase
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query
from supabase import Client

from backoffice.api.deps import get_business_id, store_failure
from backoffice.core.database import get_supabase
from backoffice.core.exceptions import StoreError
from backoffice.repositories.order_repository import OrderRepository

router = APIRouter(prefix="/orders", tags=["Orders"])


@router.get("")
def get_orders(
    business_id: str = Depends(get_business_id),
    id: Optional[str] = Query(None, description="Fetch a single order with its items"),
    client: Client = Depends(get_supabase),
):
    """
    Get the business's orders, newest first, or one order with items (null when not found)
    """
    repo = OrderRepository(client)

    try:
        if id:
            order = repo.find_by_id(business_id, id)
            data = order.to_dict() if order else None
        else:
            data = [order.to_dict() for order in repo.find_all(business_id)]
    except StoreError as e:
        raise store_failure(e, "Failed to fetch orders")

    return {"success": True, "data": data}
