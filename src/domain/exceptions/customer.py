"""Customer-related domain exceptions."""

from .base import DomainException


class CustomerNotFoundException(DomainException):
    """Raised when a customer cannot be found."""

    def __init__(self, customer_id: int):
        super().__init__(
            message=f"Customer not found: {customer_id}",
            code="CUSTOMER_NOT_FOUND",
        )
        self.customer_id = customer_id


class CustomerAlreadyExistsException(DomainException):
    """Raised when a CPF or email is already registered."""

    def __init__(self, field: str, value: str):
        super().__init__(
            message=f"Customer with {field} {value} already exists",
            code="CUSTOMER_ALREADY_EXISTS",
        )
        self.field = field
