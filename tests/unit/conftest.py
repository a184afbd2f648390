"""
Fixtures for unit tests.

Provides in-memory repositories so the services can be exercised
without a database.
"""

from decimal import Decimal
from itertools import count
from typing import Dict, List, Optional
from uuid import UUID

import pytest

from src.domain.entities import Address, Credit, Customer
from src.domain.interfaces import CreditRepository, CustomerRepository



class InMemoryCustomerRepository(CustomerRepository):
    """Customer repository backed by a dict."""

    def __init__(self):
        self.customers: Dict[int, Customer] = {}
        self.credits: Optional["InMemoryCreditRepository"] = None
        self._ids = count(1)

    async def save(self, customer: Customer) -> Customer:
        if customer.id is None:
            customer.id = next(self._ids)
        self.customers[customer.id] = customer
        return customer

    async def get_by_id(self, customer_id: int) -> Optional[Customer]:
        return self.customers.get(customer_id)

    async def get_by_cpf(self, cpf: str) -> Optional[Customer]:
        return next((c for c in self.customers.values() if c.cpf == cpf), None)

    async def get_by_email(self, email: str) -> Optional[Customer]:
        return next((c for c in self.customers.values() if c.email == email), None)

    async def delete(self, customer_id: int) -> None:
        self.customers.pop(customer_id, None)
        if self.credits is not None:
            self.credits.items = [c for c in self.credits.items if c.customer_id != customer_id]

    async def delete_all(self) -> None:
        self.customers.clear()
        if self.credits is not None:
            self.credits.items.clear()


class InMemoryCreditRepository(CreditRepository):
    """Credit repository backed by a list."""

    def __init__(self):
        self.items: List[Credit] = []
        self._ids = count(1)

    async def save(self, credit: Credit) -> Credit:
        credit.id = next(self._ids)
        self.items.append(credit)
        return credit

    async def get_by_credit_code(self, credit_code: UUID) -> Optional[Credit]:
        return next((c for c in self.items if c.credit_code == credit_code), None)

    async def get_by_customer_id(self, customer_id: int) -> List[Credit]:
        return [c for c in self.items if c.customer_id == customer_id]

    async def delete_all(self) -> None:
        self.items.clear()


def make_customer(**overrides) -> Customer:
    fields = {
        "first_name": "Felipe",
        "last_name": "Fruhauf",
        "cpf": "12345678910",
        "email": "felipe@teste.com",
        "income": Decimal("3000.0"),
        "password": "123456",
        "address": Address(zip_code="99555000", street="Rua dos Testes"),
    }
    fields.update(overrides)
    return Customer(**fields)


@pytest.fixture
def credit_repo() -> InMemoryCreditRepository:
    return InMemoryCreditRepository()


@pytest.fixture
def customer_repo(credit_repo: InMemoryCreditRepository) -> InMemoryCustomerRepository:
    repo = InMemoryCustomerRepository()
    repo.credits = credit_repo
    return repo
