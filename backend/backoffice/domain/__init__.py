"""
Domain Layer - Business Entities

Pydantic models for every entity the API reads or writes.
Repositories return these instead of raw store rows.
"""
from backoffice.domain.business import Business
from backoffice.domain.customer import Customer, CustomerBalance, OverdueCustomer
from backoffice.domain.product import Product
from backoffice.domain.order import Order, OrderItem, PurchaseItem, PurchaseRequest, PurchaseResult

__all__ = [
    'Business',
    'Customer',
    'CustomerBalance',
    'OverdueCustomer',
    'Product',
    'Order',
    'OrderItem',
    'PurchaseItem',
    'PurchaseRequest',
    'PurchaseResult',
]
