"""
Service Layer - purchase and balance protocols
"""
from backoffice.services.balance_service import BalanceService
from backoffice.services.purchase_service import PurchaseService, validate_purchase_request

__all__ = ['BalanceService', 'PurchaseService', 'validate_purchase_request']
