"""
Order Domain Models

Orders, their line items, and the purchase request/result contract of the
process_purchase store procedure.
"""
from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import Field

from backoffice.domain.base import DomainModel


class OrderItem(DomainModel):
    """
    Order Item domain model - one line of an order

    Fields:
        id: Order item ID
        order_id: Parent order ID
        product_id: Purchased product
        quantity: Units purchased (> 0)
        unit_price: Price per unit at purchase time (>= 0)
        created_at: Creation timestamp
    """

    id: str = Field(..., description="Order item ID")
    order_id: str = Field(..., description="Parent order ID")
    product_id: str = Field(..., description="Product ID")
    quantity: int = Field(..., description="Quantity ordered", ge=1)
    unit_price: Decimal = Field(..., description="Price per unit", ge=0)
    created_at: datetime = Field(..., description="Creation timestamp")


class Order(DomainModel):
    """
    Order domain model - created only by a successful purchase, immutable after

    `items` is filled when a single order is fetched; list queries leave it empty.
    """

    id: str = Field(..., description="Order ID")
    business_id: str = Field(..., description="Owning business ID")
    customer_id: str = Field(..., description="Buying customer ID")
    total_amount: Decimal = Field(..., description="Sum of quantity x unit_price over items", ge=0)
    created_at: datetime = Field(..., description="Creation timestamp")
    items: List[OrderItem] = Field(default_factory=list, description="Line items")

    def to_dict(self) -> dict:
        data = super().to_dict()
        data['items'] = [item.to_dict() for item in self.items]
        return data


class PurchaseItem(DomainModel):
    """Line item of a purchase request"""

    product_id: str
    quantity: int = Field(..., gt=0)
    unit_price: Decimal = Field(..., ge=0)

    def to_payload(self) -> dict:
        """Shape sent to process_purchase (JSON numbers, no Decimal)"""
        return {
            'product_id': self.product_id,
            'quantity': self.quantity,
            'unit_price': float(self.unit_price),
        }


class PurchaseRequest(DomainModel):
    """A validated purchase: one customer, a non-empty ordered list of items"""

    customer_id: str
    items: List[PurchaseItem] = Field(..., min_length=1)

    @property
    def total_amount(self) -> Decimal:
        return sum((item.quantity * item.unit_price for item in self.items), Decimal("0"))


class PurchaseResult(DomainModel):
    """Structured outcome returned by the process_purchase procedure"""

    success: bool
    order_id: Optional[str] = None
    total_amount: Optional[Decimal] = None
    customer_balance: Optional[Decimal] = None
    error: Optional[str] = None

    def to_dict(self) -> dict:
        data = super().to_dict()
        # Failure-only / success-only fields are omitted rather than sent as null
        return {key: value for key, value in data.items() if value is not None}
