"""
Purchase Service
Validates purchase requests and runs them as one store transaction

A purchase turns a cart into an order: order row, one row per item, stock
decrement per product, customer balance increase. All of that happens inside
the process_purchase procedure; this service only validates, issues the single
call, and types the outcome. Nothing here is retried or cleaned up, since a
failed transaction leaves nothing behind.
"""
import logging
from decimal import Decimal
from typing import Any, Dict, Optional

from supabase import Client

from backoffice.core.exceptions import (
    InvalidRequestError,
    PurchaseRejectedError,
    StoreError,
    StoreUnavailableError,
)
from backoffice.core.validation import is_integer, is_number
from backoffice.domain.order import PurchaseItem, PurchaseRequest, PurchaseResult
from backoffice.repositories.order_repository import OrderRepository

logger = logging.getLogger(__name__)


def validate_purchase_request(payload: Any) -> PurchaseRequest:
    """
    Check a raw purchase body and build a PurchaseRequest

    Rules are checked in order and the first failure is reported:
    customer_id present, items a non-empty list, and for every item
    product_id/quantity/unit_price present, quantity an integer > 0,
    unit_price a number >= 0.

    Raises:
        InvalidRequestError: naming the rule that failed
    """
    if not isinstance(payload, dict):
        raise InvalidRequestError("Request body must be a JSON object")

    customer_id = payload.get("customer_id")
    if not customer_id:
        raise InvalidRequestError("customer_id is required")

    items = payload.get("items")
    if not items or not isinstance(items, list):
        raise InvalidRequestError("items array is required and must not be empty")

    validated = []
    for item in items:
        if (
            not isinstance(item, dict)
            or not item.get("product_id")
            or item.get("quantity") is None
            or item.get("unit_price") is None
        ):
            raise InvalidRequestError("Each item must have product_id, quantity, and unit_price")

        quantity = item["quantity"]
        unit_price = item["unit_price"]

        if not is_integer(quantity):
            raise InvalidRequestError("quantity must be an integer")
        if not is_number(unit_price):
            raise InvalidRequestError("unit_price must be a number")
        if quantity <= 0:
            raise InvalidRequestError("Quantity must be greater than 0")
        if unit_price < 0:
            raise InvalidRequestError("unit_price cannot be negative")

        validated.append(PurchaseItem(
            product_id=str(item["product_id"]),
            quantity=int(quantity),
            unit_price=Decimal(str(unit_price)),
        ))

    return PurchaseRequest(customer_id=str(customer_id), items=validated)


class PurchaseService:
    """
    Service for processing purchases

    Handles:
    - Request validation (before any store call)
    - The single process_purchase call
    - Mapping store outcomes to PurchaseResult / typed errors
    """

    def __init__(self, client: Optional[Client] = None, orders: Optional[OrderRepository] = None):
        self.orders = orders or OrderRepository(client)

    def process(self, business_id: str, payload: Dict[str, Any]) -> PurchaseResult:
        """
        Validate and execute a purchase

        Args:
            business_id: Tenant
            payload: Raw body {customer_id, items: [{product_id, quantity, unit_price}]}

        Returns:
            PurchaseResult with order_id, total_amount and customer_balance

        Raises:
            InvalidRequestError: body failed validation (store not called)
            PurchaseRejectedError: store refused the purchase (stock, credit limit, ...)
            StoreUnavailableError: store could not be reached
        """
        request = validate_purchase_request(payload)

        try:
            result = self.orders.process_purchase(business_id, request)
        except StoreUnavailableError:
            raise
        except StoreError as e:
            logger.warning(f"Purchase rejected by store for customer {request.customer_id}: {e.message}")
            raise PurchaseRejectedError(e.message or "Failed to process purchase") from e

        if not result.success:
            reason = result.error or "Purchase failed"
            logger.warning(
                f"Purchase rejected for customer {request.customer_id} "
                f"(requested total {request.total_amount}): {reason}"
            )
            raise PurchaseRejectedError(reason)

        if result.total_amount is not None and result.total_amount != request.total_amount:
            logger.warning(
                f"Order {result.order_id} total {result.total_amount} differs from "
                f"requested total {request.total_amount}"
            )

        logger.info(
            f"Purchase completed: order {result.order_id} for customer {request.customer_id}, "
            f"{len(request.items)} items, total {result.total_amount}"
        )
        return result
