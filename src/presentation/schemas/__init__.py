"""Pydantic schemas for API request/response validation."""

from .credit import CreditRequestSchema, CreditSummarySchema, CreditViewSchema
from .customer import CustomerRequestSchema, CustomerUpdateSchema, CustomerViewSchema
from .error import ErrorResponseSchema

__all__ = [
    "CreditRequestSchema",
    "CreditSummarySchema",
    "CreditViewSchema",
    "CustomerRequestSchema",
    "CustomerUpdateSchema",
    "CustomerViewSchema",
    "ErrorResponseSchema",
]
