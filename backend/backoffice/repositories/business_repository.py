"""
Business Repository - Data Access Layer for Businesses
"""
from typing import List, Optional

from backoffice.domain.business import Business
from backoffice.repositories.base import BaseRepository


class BusinessRepository(BaseRepository):
    """
    Repository for Business data access

    Businesses are the tenants themselves, so they are the only entity
    that is not filtered by business_id.
    """

    table = "businesses"

    def find_all(self) -> List[Business]:
        rows = self._rows(
            self.client.table(self.table).select("*").order("created_at"),
            "fetching businesses",
        )
        return [Business(**row) for row in rows]

    def find_by_id(self, business_id: str) -> Optional[Business]:
        """
        Find business by ID

        Returns:
            Business or None if not found
        """
        row = self._first(
            self.client.table(self.table).select("*").eq("id", business_id),
            "fetching business",
        )
        return Business(**row) if row else None

    def create(self, name: str) -> Business:
        row = self._first(
            self.client.table(self.table).insert({"name": name}),
            "creating business",
        )
        return Business(**self._require(row, "creating business"))

    def ping(self) -> None:
        """Cheapest possible round trip, used by the health check"""
        self._execute(
            self.client.table(self.table).select("id").limit(1),
            "checking store health",
        )
