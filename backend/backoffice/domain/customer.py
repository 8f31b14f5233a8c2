"""
Customer Domain Models

Customer, its running credit balance, and the overdue-customer report row.
"""
from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import Field

from backoffice.domain.base import DomainModel


class Customer(DomainModel):
    """
    Customer domain model - a buyer on credit for one business

    Fields:
        id: Customer ID
        business_id: Owning business (tenant)
        name: Customer name
        credit_limit: Maximum balance the customer may accrue through purchases
        created_at: When the customer was created
    """

    id: str = Field(..., description="Customer ID")
    business_id: str = Field(..., description="Owning business ID")
    name: str = Field(..., description="Customer name")
    credit_limit: Decimal = Field(..., description="Maximum balance allowed by purchases")
    created_at: datetime = Field(..., description="Creation timestamp")


class CustomerBalance(DomainModel):
    """
    Running amount a customer owes (1:1 with Customer)

    Purchases increase it; adjustments move it either way. Never overwritten
    directly: every change is an increment applied inside the store.
    """

    customer_id: str = Field(..., description="Customer ID")
    business_id: str = Field(..., description="Owning business ID")
    balance: Decimal = Field(Decimal("0"), description="Outstanding amount (signed)")
    updated_at: Optional[datetime] = Field(None, description="Last change timestamp")


class OverdueCustomer(DomainModel):
    """Row of the overdue-customers report"""

    customer_id: str
    customer_name: str
    balance: Decimal
    oldest_order_date: datetime
    days_since_order: int
