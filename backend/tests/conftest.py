"""
Pytest fixtures and configuration for Backoffice API tests

This file provides shared fixtures that can be used across all test modules.
No real store is needed: the Supabase client is replaced by FakeSupabase.
"""
import pytest
from fastapi.testclient import TestClient

from fakes import FakeSupabase

from backoffice.core.config import settings
from backoffice.core.database import get_supabase
from backoffice.main import app


@pytest.fixture
def fake_store():
    """
    Provides an empty in-memory store

    Scope: function (fresh store per test)
    """
    return FakeSupabase()


@pytest.fixture
def seed(fake_store):
    """
    Provides a tenant with one customer (credit limit 100, balance 0),
    two products, and a second tenant with its own customer and product
    """
    business = fake_store.add_business("Acme Store")
    customer = fake_store.add_customer(business["id"], name="Jane Doe", credit_limit=100)
    p1 = fake_store.add_product(business["id"], name="Coffee", stock=10, price=10)
    p2 = fake_store.add_product(business["id"], name="Mug", stock=5, price=5)

    other = fake_store.add_business("Other Shop")
    other_customer = fake_store.add_customer(other["id"], name="John Roe", credit_limit=50)
    other_product = fake_store.add_product(other["id"], name="Tea", stock=3, price=4)

    fake_store.calls.clear()

    return {
        "business_id": business["id"],
        "customer_id": customer["id"],
        "p1": p1["id"],
        "p2": p2["id"],
        "other_business_id": other["id"],
        "other_customer_id": other_customer["id"],
        "other_product_id": other_product["id"],
    }


@pytest.fixture
def api_client(fake_store, monkeypatch):
    """
    Provides a TestClient wired to the in-memory store

    DEFAULT_BUSINESS_ID is cleared so tenant resolution depends on the header only.
    """
    monkeypatch.setattr(settings, "DEFAULT_BUSINESS_ID", None)
    app.dependency_overrides[get_supabase] = lambda: fake_store

    yield TestClient(app, raise_server_exceptions=False)

    app.dependency_overrides.clear()


@pytest.fixture
def tenant_headers(seed):
    return {"x-business-id": seed["business_id"]}


@pytest.fixture
def sample_purchase(seed):
    """
    Provides a purchase body: 2 x p1 at 10 and 1 x p2 at 5 (total 25)
    """
    return {
        "customer_id": seed["customer_id"],
        "items": [
            {"product_id": seed["p1"], "quantity": 2, "unit_price": 10},
            {"product_id": seed["p2"], "quantity": 1, "unit_price": 5},
        ],
    }
