"""
Shared base for domain models
"""
from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base model: builds from store rows, renders money as JSON numbers"""

    model_config = ConfigDict(
        from_attributes=True,
        extra="ignore",
    )

    def to_dict(self) -> dict:
        """Convert to dictionary with Decimal to float and datetime to ISO string"""
        data = self.model_dump()

        for key, value in data.items():
            if isinstance(value, Decimal):
                data[key] = float(value)
            elif isinstance(value, datetime):
                data[key] = value.isoformat()

        return data
