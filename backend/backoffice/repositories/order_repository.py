"""
Order Repository - Data Access Layer for Orders

Reads orders and their items, and hands purchases to the process_purchase
store procedure. Orders are never written any other way.
"""
from typing import List, Optional

from backoffice.domain.order import Order, OrderItem, PurchaseRequest, PurchaseResult
from backoffice.repositories.base import BaseRepository


class OrderRepository(BaseRepository):
    """Repository for Order data access"""

    table = "orders"
    items_table = "order_items"

    def find_all(self, business_id: str) -> List[Order]:
        """
        Find all orders of a business, newest first (without items)
        """
        rows = self._rows(
            self.client.table(self.table)
            .select("*")
            .eq("business_id", business_id)
            .order("created_at", desc=True),
            "fetching orders",
        )
        return [Order(**row) for row in rows]

    def find_by_id(self, business_id: str, order_id: str) -> Optional[Order]:
        """
        Find order by ID with its items

        Returns:
            Order or None if not found
        """
        row = self._first(
            self.client.table(self.table)
            .select("*")
            .eq("business_id", business_id)
            .eq("id", order_id),
            "fetching order",
        )
        if not row:
            return None

        order = Order(**row)
        order.items = self.find_items(order.id)
        return order

    def find_items(self, order_id: str) -> List[OrderItem]:
        # Callers reach this only through a tenant-checked order
        rows = self._rows(
            self.client.table(self.items_table)
            .select("*")
            .eq("order_id", order_id)
            .order("created_at"),
            "fetching order items",
        )
        return [OrderItem(**row) for row in rows]

    def process_purchase(self, business_id: str, request: PurchaseRequest) -> PurchaseResult:
        """
        Run the purchase transaction in the store

        One call: the procedure checks stock and credit limit, writes the order
        and its items, decrements stock and raises the balance, or does nothing.

        Returns:
            PurchaseResult as reported by the store (success may be False)
        """
        data = self._execute(
            self.client.rpc("process_purchase", {
                "p_business_id": business_id,
                "p_customer_id": request.customer_id,
                "p_items": [item.to_payload() for item in request.items],
            }),
            "processing purchase",
        ).data

        if isinstance(data, list):
            data = data[0] if data else None

        if not isinstance(data, dict):
            return PurchaseResult(success=False, error="Purchase failed")

        return PurchaseResult(**data)
