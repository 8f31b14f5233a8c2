"""
Balance Service
Direct adjustments of a customer's running balance

Positive amounts are charges, negative amounts are payments. The increment is
applied by the store in one call; credit limits are not enforced here.
"""
import logging
from decimal import Decimal
from typing import Any, Dict, Optional

from supabase import Client

from backoffice.core.exceptions import InvalidRequestError, StoreError
from backoffice.core.validation import is_number
from backoffice.domain.customer import CustomerBalance
from backoffice.repositories.customer_balance_repository import CustomerBalanceRepository

logger = logging.getLogger(__name__)


class BalanceService:
    """Service for customer balance adjustments"""

    def __init__(
        self,
        client: Optional[Client] = None,
        balances: Optional[CustomerBalanceRepository] = None,
    ):
        self.balances = balances or CustomerBalanceRepository(client)

    def adjust(self, business_id: str, payload: Dict[str, Any]) -> CustomerBalance:
        """
        Add a signed amount to a customer's balance

        Args:
            business_id: Tenant
            payload: Raw body {customer_id, amount}

        Returns:
            Updated CustomerBalance

        Raises:
            InvalidRequestError: customer_id or amount missing / amount not numeric
            StoreError: store failed or returned no balance record
        """
        if not isinstance(payload, dict):
            raise InvalidRequestError("Request body must be a JSON object")

        customer_id = payload.get("customer_id")
        amount = payload.get("amount")

        if not customer_id or amount is None:
            raise InvalidRequestError("Missing customer_id or amount")
        if not is_number(amount):
            raise InvalidRequestError("amount must be a number")

        balance = self.balances.adjust(business_id, str(customer_id), Decimal(str(amount)))

        if balance is None:
            logger.error(f"Balance adjustment for customer {customer_id} returned no record")
            raise StoreError("Failed to adjust balance")

        logger.info(f"Balance adjusted for customer {customer_id} by {amount}: now {balance.balance}")
        return balance
