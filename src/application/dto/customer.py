"""Data transfer objects for customer operations."""

from dataclasses import dataclass
from decimal import Decimal

from src.domain.entities import Address, Customer


@dataclass(frozen=True)
class CustomerRequest:
    """Input data for registering a customer."""

    first_name: str
    last_name: str
    cpf: str
    email: str
    income: Decimal
    password: str
    zip_code: str
    street: str

    def to_entity(self) -> Customer:
        return Customer(
            first_name=self.first_name.strip(),
            last_name=self.last_name.strip(),
            cpf=self.cpf.strip(),
            email=self.email.strip().lower(),
            income=self.income,
            password=self.password,
            address=Address(zip_code=self.zip_code.strip(), street=self.street.strip()),
        )


@dataclass(frozen=True)
class CustomerUpdateRequest:
    """Replacement values for the mutable customer fields."""

    first_name: str
    last_name: str
    income: Decimal
    zip_code: str
    street: str

    def apply_to(self, customer: Customer) -> Customer:
        customer.first_name = self.first_name.strip()
        customer.last_name = self.last_name.strip()
        customer.income = self.income
        customer.address = Address(zip_code=self.zip_code.strip(), street=self.street.strip())
        return customer


@dataclass(frozen=True)
class CustomerView:
    """Customer data safe to return to clients (no password)."""

    id: int
    first_name: str
    last_name: str
    cpf: str
    email: str
    income: Decimal
    zip_code: str
    street: str

    @classmethod
    def from_entity(cls, customer: Customer) -> "CustomerView":
        return cls(
            id=customer.id,
            first_name=customer.first_name,
            last_name=customer.last_name,
            cpf=customer.cpf,
            email=customer.email,
            income=customer.income,
            zip_code=customer.address.zip_code,
            street=customer.address.street,
        )
