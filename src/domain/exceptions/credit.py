"""Credit-related domain exceptions."""

from .base import DomainException


class CreditNotFoundException(DomainException):
    """Raised when a credit cannot be found."""

    def __init__(self, credit_code: str):
        super().__init__(
            message=f"Credit not found: {credit_code}",
            code="CREDIT_NOT_FOUND",
        )
        self.credit_code = credit_code


class CreditOwnershipException(DomainException):
    """Raised when a credit is requested on behalf of a customer who does not own it."""

    def __init__(self, credit_code: str, customer_id: int):
        super().__init__(
            message=f"Credit {credit_code} does not belong to customer {customer_id}",
            code="CREDIT_OWNERSHIP_MISMATCH",
        )
        self.credit_code = credit_code
        self.customer_id = customer_id
