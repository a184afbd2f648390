"""Data Transfer Objects for application layer."""

from .credit import CreditRequest, CreditSummary, CreditView
from .customer import CustomerRequest, CustomerUpdateRequest, CustomerView

__all__ = [
    "CreditRequest",
    "CreditSummary",
    "CreditView",
    "CustomerRequest",
    "CustomerUpdateRequest",
    "CustomerView",
]
