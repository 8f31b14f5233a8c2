"""
Products API Endpoints
Handles product catalog listing and creation
"""
from decimal import Decimal
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Query
from supabase import Client

from backoffice.api.deps import get_business_id, store_failure
from backoffice.core.database import get_supabase
from backoffice.core.exceptions import StoreError
from backoffice.core.validation import is_integer, is_number
from backoffice.repositories.product_repository import ProductRepository

router = APIRouter(prefix="/products", tags=["Products"])


@router.get("")
def get_products(
    business_id: str = Depends(get_business_id),
    id: Optional[str] = Query(None, description="Restrict the list to one product"),
    client: Client = Depends(get_supabase),
):
    """
    Get all products of the business

    With ?id= the list holds at most that one product.
    """
    try:
        products = ProductRepository(client).find_all(business_id, product_id=id)
    except StoreError as e:
        raise store_failure(e, "Failed to fetch products")

    return {"success": True, "data": [product.to_dict() for product in products]}


@router.post("", status_code=201)
def create_product(
    business_id: str = Depends(get_business_id),
    payload: Any = Body(None),
    client: Client = Depends(get_supabase),
):
    """Create a new product"""
    if not isinstance(payload, dict):
        payload = {}

    name = payload.get("name")
    stock = payload.get("stock")
    price = payload.get("price")

    if not name or stock is None or price is None:
        raise HTTPException(status_code=400, detail="Missing product fields")
    if not is_integer(stock) or stock < 0:
        raise HTTPException(status_code=400, detail="stock must be a non-negative integer")
    if not is_number(price) or price < 0:
        raise HTTPException(status_code=400, detail="price must be a non-negative number")

    try:
        product = ProductRepository(client).create(
            business_id, str(name), int(stock), Decimal(str(price))
        )
    except StoreError as e:
        raise store_failure(e, "Failed to create product")

    return {"success": True, "data": product.to_dict()}
