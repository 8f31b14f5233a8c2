"""
Product Domain Model

Represents a product sold by one business.
"""
from datetime import datetime
from decimal import Decimal

from pydantic import Field

from backoffice.domain.base import DomainModel


class Product(DomainModel):
    """
    Product domain model

    Fields:
        id: Product ID
        business_id: Owning business (tenant)
        name: Product name
        stock: Units on hand, decremented by purchases
        price: List price
        created_at: When the product was created
    """

    id: str = Field(..., description="Product ID")
    business_id: str = Field(..., description="Owning business ID")
    name: str = Field(..., description="Product name")
    stock: int = Field(0, description="Units on hand", ge=0)
    price: Decimal = Field(..., description="List price", ge=0)
    created_at: datetime = Field(..., description="Creation timestamp")
