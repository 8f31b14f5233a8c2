"""
Customer Balance Repository - Data Access Layer for customer balances
"""
from decimal import Decimal
from typing import Optional

from backoffice.domain.customer import CustomerBalance
from backoffice.repositories.base import BaseRepository


class CustomerBalanceRepository(BaseRepository):
    """
    Repository for CustomerBalance data access

    Balances are never written with a plain update: adjust() asks the store to
    add the amount inside adjust_customer_balance, so concurrent adjustments
    for the same customer cannot lose an update.
    """

    table = "customer_balances"

    def find_by_customer(self, business_id: str, customer_id: str) -> Optional[CustomerBalance]:
        row = self._first(
            self.client.table(self.table)
            .select("*")
            .eq("business_id", business_id)
            .eq("customer_id", customer_id),
            "fetching customer balance",
        )
        return CustomerBalance(**row) if row else None

    def adjust(self, business_id: str, customer_id: str, amount: Decimal) -> Optional[CustomerBalance]:
        """
        Atomically add `amount` (signed) to the customer's balance

        Returns:
            The updated balance record, or None if the store returned nothing
        """
        row = self._first(
            self.client.rpc("adjust_customer_balance", {
                "p_business_id": business_id,
                "p_customer_id": customer_id,
                "p_amount": float(amount),
            }),
            "adjusting customer balance",
        )
        return CustomerBalance(**row) if row else None
