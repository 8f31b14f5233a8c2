"""
Purchase API Endpoint
"""
import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException
from supabase import Client

from backoffice.api.deps import get_business_id
from backoffice.core.database import get_supabase
from backoffice.core.exceptions import (
    InvalidRequestError,
    PurchaseRejectedError,
    StoreUnavailableError,
)
from backoffice.services.purchase_service import PurchaseService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/purchase", tags=["Purchase"])


@router.post("", status_code=201)
def create_purchase(
    business_id: str = Depends(get_business_id),
    payload: Any = Body(None),
    client: Client = Depends(get_supabase),
):
    """
    Process a purchase as one store transaction

    Body: {customer_id, items: [{product_id, quantity, unit_price}]}

    400 for invalid bodies and for purchases the store refuses (stock,
    credit limit); 500 when the store cannot be reached.
    """
    try:
        result = PurchaseService(client).process(business_id, payload)
    except InvalidRequestError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except PurchaseRejectedError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except StoreUnavailableError as e:
        logger.error(f"Purchase failed, store unavailable: {e.message}")
        raise HTTPException(status_code=500, detail="Failed to process purchase")

    return {"success": True, "data": result.to_dict()}
