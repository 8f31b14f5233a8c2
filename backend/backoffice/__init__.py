"""
Backoffice Credit API

Multi-tenant back-office service for businesses, customers, products,
customer credit balances and purchases.
"""
__version__ = "1.0.0"
