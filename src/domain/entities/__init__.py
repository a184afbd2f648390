"""Domain Entities - Core business objects."""

from .credit import Credit, CreditStatus
from .customer import Address, Customer

__all__ = [
    "Address",
    "Credit",
    "CreditStatus",
    "Customer",
]
