"""
Businesses API Endpoints
"""
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Query
from supabase import Client

from backoffice.api.deps import get_business_id, store_failure
from backoffice.core.database import get_supabase
from backoffice.core.exceptions import StoreError
from backoffice.repositories.business_repository import BusinessRepository

router = APIRouter(prefix="/businesses", tags=["Businesses"])


@router.get("", dependencies=[Depends(get_business_id)])
def get_businesses(
    id: Optional[str] = Query(None, description="Fetch a single business"),
    client: Client = Depends(get_supabase),
):
    """
    Get all businesses, or one by id (null when it does not exist)
    """
    repo = BusinessRepository(client)

    try:
        if id:
            business = repo.find_by_id(id)
            data = business.to_dict() if business else None
        else:
            data = [business.to_dict() for business in repo.find_all()]
    except StoreError as e:
        raise store_failure(e, "Failed to fetch businesses")

    return {"success": True, "data": data}


@router.post("", status_code=201, dependencies=[Depends(get_business_id)])
def create_business(
    payload: Any = Body(None),
    client: Client = Depends(get_supabase),
):
    """Create a new business"""
    name = payload.get("name") if isinstance(payload, dict) else None
    if not name or not isinstance(name, str):
        raise HTTPException(status_code=400, detail="Missing business name")

    try:
        business = BusinessRepository(client).create(name)
    except StoreError as e:
        raise store_failure(e, "Failed to create business")

    return {"success": True, "data": business.to_dict()}
