"""
Customer Repository - Data Access Layer for Customers

Handles customer reads, creation (customer + zero balance in one store
transaction) and the overdue-customers report.
"""
from decimal import Decimal
from typing import List, Optional

from backoffice.domain.customer import Customer, OverdueCustomer
from backoffice.repositories.base import BaseRepository


class CustomerRepository(BaseRepository):
    """Repository for Customer data access, always scoped by business_id"""

    table = "customers"

    def find_by_business(self, business_id: str) -> List[Customer]:
        """
        Find all customers of a business

        Returns:
            List of customers (empty when the business has none)
        """
        rows = self._rows(
            self.client.table(self.table)
            .select("*")
            .eq("business_id", business_id)
            .order("created_at"),
            "fetching customers",
        )
        return [Customer(**row) for row in rows]

    def find_by_id(self, business_id: str, customer_id: str) -> Optional[Customer]:
        """
        Find customer by ID within a business

        Returns:
            Customer or None if not found (or owned by another business)
        """
        row = self._first(
            self.client.table(self.table)
            .select("*")
            .eq("business_id", business_id)
            .eq("id", customer_id),
            "fetching customer",
        )
        return Customer(**row) if row else None

    def create(self, business_id: str, name: str, credit_limit: Decimal) -> Customer:
        """
        Create a customer and its zero balance row

        Both rows are written by the create_customer_with_balance procedure,
        so a customer never exists without a balance.
        """
        row = self._first(
            self.client.rpc("create_customer_with_balance", {
                "p_business_id": business_id,
                "p_name": name,
                "p_credit_limit": float(credit_limit),
            }),
            "creating customer",
        )
        return Customer(**self._require(row, "creating customer"))

    def find_overdue(self, business_id: str, days: int) -> List[OverdueCustomer]:
        """
        Customers with a positive balance whose oldest order is older than `days`

        Args:
            business_id: Tenant
            days: Age threshold in days
        """
        rows = self._rows(
            self.client.rpc("get_overdue_customers", {
                "p_business_id": business_id,
                "p_days_overdue": days,
            }),
            "fetching overdue customers",
        )
        return [OverdueCustomer(**row) for row in rows]
