"""Request validation exceptions."""

from dataclasses import dataclass
from typing import List

from .base import DomainException


@dataclass(frozen=True)
class FieldError:
    """A single violated constraint on a request field."""

    field: str
    message: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


class RequestValidationException(DomainException):
    """Raised when a request violates one or more field constraints."""

    def __init__(self, errors: List[FieldError]):
        super().__init__(
            message="; ".join(str(error) for error in errors),
            code="INVALID_REQUEST",
        )
        self.errors = list(errors)

    @property
    def details(self) -> List[str]:
        return [str(error) for error in self.errors]
