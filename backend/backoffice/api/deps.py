"""
Shared route dependencies and error translation
"""
from typing import Optional

from fastapi import Header, HTTPException

from backoffice.core.config import settings
from backoffice.core.exceptions import StoreError


def get_business_id(x_business_id: Optional[str] = Header(None)) -> str:
    """
    Resolve the tenant for a request

    Header x-business-id wins; otherwise DEFAULT_BUSINESS_ID from settings.
    Neither present is a 400 raised before any store access.
    """
    business_id = x_business_id or settings.DEFAULT_BUSINESS_ID
    if not business_id:
        raise HTTPException(status_code=400, detail="Missing business_id")
    return business_id


def store_failure(error: StoreError, fallback: str) -> HTTPException:
    """500 carrying the store's message when it gave one"""
    return HTTPException(status_code=500, detail=error.message or fallback)
