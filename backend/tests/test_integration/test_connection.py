"""
Connection test against a real Supabase project

Skipped unless SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY are set
(e.g. in backend/.env) and sql/schema.sql has been applied.
"""
import os

import pytest
from dotenv import load_dotenv

load_dotenv()

pytestmark = pytest.mark.skipif(
    not os.getenv("SUPABASE_URL") or not os.getenv("SUPABASE_SERVICE_ROLE_KEY"),
    reason="Supabase credentials not configured",
)


@pytest.fixture(scope="module")
def live_client():
    from supabase import create_client

    return create_client(os.environ["SUPABASE_URL"], os.environ["SUPABASE_SERVICE_ROLE_KEY"])


class TestLiveStore:
    """Read-only checks of the deployed schema"""

    def test_ping(self, live_client):
        from backoffice.repositories.business_repository import BusinessRepository

        BusinessRepository(live_client).ping()

    @pytest.mark.parametrize("table", [
        "businesses", "customers", "products", "customer_balances", "orders", "order_items",
    ])
    def test_tables_exist(self, live_client, table):
        response = live_client.table(table).select("*").limit(1).execute()

        assert isinstance(response.data, list)

    def test_overdue_procedure_exists(self, live_client):
        response = live_client.rpc("get_overdue_customers", {
            "p_business_id": "00000000-0000-0000-0000-000000000000",
            "p_days_overdue": 30,
        }).execute()

        assert response.data == []
