"""
Unit tests for ProductRepository

These tests validate repository logic without requiring a database connection.
"""
from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from backoffice.core.exceptions import StoreError, StoreUnavailableError
from backoffice.domain.product import Product
from backoffice.repositories.product_repository import ProductRepository


class TestProductRepository:
    """Test ProductRepository methods"""

    def test_find_by_id_returns_product(self):
        """Test find_by_id returns a Product domain model"""
        # Arrange: Mock store client
        mock_client = MagicMock()
        query = mock_client.table.return_value.select.return_value.eq.return_value.eq.return_value
        query.execute.return_value = MagicMock(data=[{
            'id': 'p1',
            'business_id': 'b1',
            'name': 'Coffee',
            'stock': 100,
            'price': 12.5,
            'created_at': datetime.now(timezone.utc).isoformat(),
        }])

        # Act: Call repository method
        repo = ProductRepository(mock_client)
        product = repo.find_by_id('b1', 'p1')

        # Assert: Verify result
        assert isinstance(product, Product)
        assert product.id == 'p1'
        assert product.price == Decimal('12.5')

        # Verify the query was scoped to the tenant
        mock_client.table.assert_called_once_with('products')
        mock_client.table.return_value.select.return_value.eq.assert_called_once_with('business_id', 'b1')
        query.execute.assert_called_once()

    def test_find_by_id_returns_none_when_not_found(self, fake_store, seed):
        """Test find_by_id returns None when product doesn't exist"""
        repo = ProductRepository(fake_store)

        assert repo.find_by_id(seed['business_id'], 'missing') is None

    def test_find_by_id_does_not_cross_tenants(self, fake_store, seed):
        repo = ProductRepository(fake_store)

        assert repo.find_by_id(seed['business_id'], seed['other_product_id']) is None

    def test_find_all_returns_tenant_products(self, fake_store, seed):
        products = ProductRepository(fake_store).find_all(seed['business_id'])

        assert sorted(p.name for p in products) == ['Coffee', 'Mug']
        assert all(p.business_id == seed['business_id'] for p in products)

    def test_find_all_with_id_filter(self, fake_store, seed):
        products = ProductRepository(fake_store).find_all(seed['business_id'], product_id=seed['p2'])

        assert [p.id for p in products] == [seed['p2']]

    def test_find_all_empty_tenant(self, fake_store):
        business = fake_store.add_business('Empty')

        assert ProductRepository(fake_store).find_all(business['id']) == []

    def test_create_returns_product(self, fake_store, seed):
        product = ProductRepository(fake_store).create(seed['business_id'], 'Filter', 7, Decimal('3.25'))

        assert product.name == 'Filter'
        assert product.stock == 7
        assert product.price == Decimal('3.25')
        assert fake_store.rows('products', id=product.id)[0]['business_id'] == seed['business_id']

    def test_find_all_raises_store_unavailable(self, fake_store, seed):
        fake_store.unavailable = True

        with pytest.raises(StoreUnavailableError):
            ProductRepository(fake_store).find_all(seed['business_id'])

    def test_create_with_no_row_returned_raises(self):
        mock_client = MagicMock()
        mock_client.table.return_value.insert.return_value.execute.return_value = MagicMock(data=[])

        with pytest.raises(StoreError):
            ProductRepository(mock_client).create('b1', 'Filter', 1, Decimal('1'))

    def test_product_domain_model_out_of_stock(self):
        """Test Product domain model detects out of stock correctly"""
        product = Product(
            id='p1',
            business_id='b1',
            name='Coffee',
            stock=0,
            price=Decimal('1'),
            created_at=datetime.now(timezone.utc),
        )

        assert product.to_dict()['price'] == 1.0
