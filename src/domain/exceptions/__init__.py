"""Domain Exceptions - Business rule violations and domain errors."""

from .base import DomainException
from .credit import CreditNotFoundException, CreditOwnershipException
from .customer import CustomerAlreadyExistsException, CustomerNotFoundException
from .validation import FieldError, RequestValidationException

__all__ = [
    "DomainException",
    "CreditNotFoundException",
    "CreditOwnershipException",
    "CustomerAlreadyExistsException",
    "CustomerNotFoundException",
    "FieldError",
    "RequestValidationException",
]
