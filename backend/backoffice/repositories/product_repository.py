"""
Product Repository - Data Access Layer for Products

Handles all store queries for products and returns Product domain models.
"""
from decimal import Decimal
from typing import List, Optional

from backoffice.domain.product import Product
from backoffice.repositories.base import BaseRepository


class ProductRepository(BaseRepository):
    """
    Repository for Product data access

    Stock is only ever decremented by the process_purchase procedure;
    this repository reads and creates.
    """

    table = "products"

    def find_all(self, business_id: str, product_id: Optional[str] = None) -> List[Product]:
        """
        Find products of a business

        Args:
            business_id: Tenant
            product_id: Optional filter; the result is then a list of zero or one

        Returns:
            List of products
        """
        query = self.client.table(self.table).select("*").eq("business_id", business_id)

        if product_id:
            query = query.eq("id", product_id)

        rows = self._rows(query.order("name"), "fetching products")
        return [Product(**row) for row in rows]

    def find_by_id(self, business_id: str, product_id: str) -> Optional[Product]:
        """
        Find product by ID

        Returns:
            Product or None if not found
        """
        row = self._first(
            self.client.table(self.table)
            .select("*")
            .eq("business_id", business_id)
            .eq("id", product_id),
            "fetching product",
        )
        return Product(**row) if row else None

    def create(self, business_id: str, name: str, stock: int, price: Decimal) -> Product:
        row = self._first(
            self.client.table(self.table).insert({
                "business_id": business_id,
                "name": name,
                "stock": stock,
                "price": float(price),
            }),
            "creating product",
        )
        return Product(**self._require(row, "creating product"))
