"""
Business Domain Model

A business is the tenant: every other entity belongs to exactly one.
"""
from datetime import datetime

from pydantic import Field

from backoffice.domain.base import DomainModel


class Business(DomainModel):
    """Business domain model - the root tenant scope"""

    id: str = Field(..., description="Business ID (tenant identifier)")
    name: str = Field(..., description="Business name")
    created_at: datetime = Field(..., description="Creation timestamp")
