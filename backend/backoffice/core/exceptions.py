"""
Typed errors shared by repositories, services and routes

Repositories raise StoreError / StoreUnavailableError instead of leaking
PostgREST or httpx exceptions. Services raise InvalidRequestError before any
store call and PurchaseRejectedError when the store refuses a purchase.
"""
from typing import Optional


class StoreError(Exception):
    """The backing store reported an error for a query or procedure call"""

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.code = code


class StoreUnavailableError(StoreError):
    """The backing store could not be reached"""


class InvalidRequestError(ValueError):
    """Request body or parameters failed validation"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class PurchaseRejectedError(Exception):
    """The purchase transaction was refused (stock, credit limit, unknown entity)"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
