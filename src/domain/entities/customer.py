"""Customer entity and its embedded address."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class Address:
    """Postal address embedded in a customer record."""

    zip_code: str
    street: str


@dataclass
class Customer:
    """
    A customer who can apply for credit.

    The id is assigned by the store on first save. The password is an
    opaque credential that is written but never exposed in responses.
    """

    first_name: str
    last_name: str
    cpf: str
    email: str
    income: Decimal
    password: str
    address: Address
    id: Optional[int] = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
