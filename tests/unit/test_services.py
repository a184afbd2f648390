"""
Unit tests for the credit and customer services.

The services run against in-memory repositories with a fixed clock.
"""

from datetime import date
from decimal import Decimal
from uuid import UUID, uuid4

import pytest

from src.application.dto import CreditRequest, CustomerRequest, CustomerUpdateRequest
from src.application.services import CreditService, CustomerService
from src.domain.entities import CreditStatus
from src.domain.exceptions import (
    CreditNotFoundException,
    CreditOwnershipException,
    CustomerAlreadyExistsException,
    CustomerNotFoundException,
    RequestValidationException,
)
from tests.unit.conftest import make_customer

TODAY = date(2026, 10, 17)


@pytest.fixture
def credit_service(credit_repo, customer_repo) -> CreditService:
    return CreditService(
        credit_repository=credit_repo,
        customer_repository=customer_repo,
        today=lambda: TODAY,
    )


@pytest.fixture
def customer_service(customer_repo) -> CustomerService:
    return CustomerService(customer_repository=customer_repo)


def credit_request(customer_id: int, **overrides) -> CreditRequest:
    fields = {
        "credit_value": Decimal("1000.0"),
        "day_first_installment": date(2026, 12, 17),
        "number_of_installments": 10,
        "customer_id": customer_id,
    }
    fields.update(overrides)
    return CreditRequest(**fields)


class TestCreditService:

    @pytest.mark.asyncio
    async def test_create_credit_returns_view_with_customer_data(
        self,
        credit_service,
        customer_repo,
        credit_repo,
    ):
        customer = await customer_repo.save(make_customer())

        view = await credit_service.create_credit(credit_request(customer.id))

        assert view.credit_value == Decimal("1000.0")
        assert view.number_of_installment == 10
        assert view.email_customer == "felipe@teste.com"
        assert view.income_customer == Decimal("3000.0")
        assert view.status == CreditStatus.IN_PROGRESS.value
        assert len(credit_repo.items) == 1

    @pytest.mark.asyncio
    async def test_invalid_request_is_not_persisted(
        self,
        credit_service,
        customer_repo,
        credit_repo,
    ):
        customer = await customer_repo.save(make_customer())

        with pytest.raises(RequestValidationException) as exc_info:
            await credit_service.create_credit(
                credit_request(customer.id, number_of_installments=50)
            )

        assert exc_info.value.details == [
            "numberOfInstallments: must be less than or equal to 48"
        ]
        assert credit_repo.items == []

    @pytest.mark.asyncio
    async def test_unknown_customer_raises_not_found(self, credit_service, credit_repo):
        with pytest.raises(CustomerNotFoundException):
            await credit_service.create_credit(credit_request(7))

        assert credit_repo.items == []

    @pytest.mark.asyncio
    async def test_list_credits_by_customer(self, credit_service, customer_repo):
        customer = await customer_repo.save(make_customer())
        for installments in (3, 6, 9):
            await credit_service.create_credit(
                credit_request(customer.id, number_of_installments=installments)
            )

        summaries = await credit_service.list_credits_by_customer(customer.id)

        assert [s.number_of_installments for s in summaries] == [3, 6, 9]

    @pytest.mark.asyncio
    async def test_list_credits_for_customer_without_credits(self, credit_service):
        assert await credit_service.list_credits_by_customer(1) == []

    @pytest.mark.asyncio
    async def test_get_credit_checks_ownership(self, credit_service, customer_repo):
        owner = await customer_repo.save(make_customer())
        other = await customer_repo.save(make_customer(cpf="98765432100", email="o@t.com"))
        view = await credit_service.create_credit(credit_request(owner.id))

        credit_code = UUID(view.credit_code)

        assert await credit_service.get_credit(owner.id, credit_code) == view

        with pytest.raises(CreditOwnershipException):
            await credit_service.get_credit(other.id, credit_code)

    @pytest.mark.asyncio
    async def test_get_unknown_credit(self, credit_service):
        with pytest.raises(CreditNotFoundException):
            await credit_service.get_credit(1, uuid4())


class TestCustomerService:

    @pytest.mark.asyncio
    async def test_register_hides_password(self, customer_service):
        view = await customer_service.register(
            CustomerRequest(
                first_name="Felipe",
                last_name="Fruhauf",
                cpf="12345678910",
                email="Felipe@Teste.com",
                income=Decimal("3000.0"),
                password="123456",
                zip_code="99555000",
                street="Rua dos Testes",
            )
        )

        assert view.id == 1
        assert view.email == "felipe@teste.com"
        assert not hasattr(view, "password")

    @pytest.mark.asyncio
    async def test_register_duplicate_cpf(self, customer_service, customer_repo):
        await customer_repo.save(make_customer())

        with pytest.raises(CustomerAlreadyExistsException):
            await customer_service.register(
                CustomerRequest(
                    first_name="Ana",
                    last_name="Lima",
                    cpf="12345678910",
                    email="ana@teste.com",
                    income=Decimal("100"),
                    password="secret",
                    zip_code="1",
                    street="Rua",
                )
            )

    @pytest.mark.asyncio
    async def test_update_and_delete(self, customer_service, customer_repo, credit_service):
        customer = await customer_repo.save(make_customer())
        await credit_service.create_credit(credit_request(customer.id))

        view = await customer_service.update(
            customer.id,
            CustomerUpdateRequest(
                first_name="Felipe",
                last_name="Souza",
                income=Decimal("5000"),
                zip_code="90000000",
                street="Rua Nova",
            ),
        )
        assert view.last_name == "Souza"
        assert view.street == "Rua Nova"

        await customer_service.delete(customer.id)

        with pytest.raises(CustomerNotFoundException):
            await customer_service.get(customer.id)
        assert await credit_service.list_credits_by_customer(customer.id) == []

    @pytest.mark.asyncio
    async def test_delete_unknown_customer(self, customer_service):
        with pytest.raises(CustomerNotFoundException):
            await customer_service.delete(99)
