"""
Domain Interfaces (Ports)
"""

from .repositories import CreditRepository, CustomerRepository

__all__ = [
    "CreditRepository",
    "CustomerRepository",
]
