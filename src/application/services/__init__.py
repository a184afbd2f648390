"""Application services (use cases)."""

from .credit_service import CreditService
from .customer_service import CustomerService

__all__ = [
    "CreditService",
    "CustomerService",
]
