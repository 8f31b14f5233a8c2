"""
Repository Layer - Data Access

This layer handles all store queries and returns domain models.
Repositories abstract away PostgREST details from business logic.
"""
from backoffice.repositories.business_repository import BusinessRepository
from backoffice.repositories.customer_repository import CustomerRepository
from backoffice.repositories.customer_balance_repository import CustomerBalanceRepository
from backoffice.repositories.product_repository import ProductRepository
from backoffice.repositories.order_repository import OrderRepository

__all__ = [
    'BusinessRepository',
    'CustomerRepository',
    'CustomerBalanceRepository',
    'ProductRepository',
    'OrderRepository',
]
