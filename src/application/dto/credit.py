"""Data transfer objects for credit operations."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from src.domain.entities import Credit, Customer


@dataclass(frozen=True)
class CreditRequest:
    """Input data for creating a credit."""

    credit_value: Decimal
    day_first_installment: date
    number_of_installments: int
    customer_id: int

    def to_entity(self) -> Credit:
        return Credit(
            credit_value=self.credit_value,
            day_first_installment=self.day_first_installment,
            number_of_installments=self.number_of_installments,
            customer_id=self.customer_id,
        )


@dataclass(frozen=True)
class CreditView:
    """A credit together with the owning customer's contact and income."""

    credit_code: str
    credit_value: Decimal
    number_of_installment: int
    status: str
    email_customer: str
    income_customer: Decimal

    @classmethod
    def from_entity(cls, credit: Credit, customer: Customer) -> "CreditView":
        return cls(
            credit_code=str(credit.credit_code),
            credit_value=credit.credit_value,
            number_of_installment=credit.number_of_installments,
            status=credit.status.value,
            email_customer=customer.email,
            income_customer=customer.income,
        )


@dataclass(frozen=True)
class CreditSummary:
    """Brief summary of a credit for customer listings."""

    credit_code: str
    credit_value: Decimal
    number_of_installments: int
    status: str

    @classmethod
    def from_entity(cls, credit: Credit) -> "CreditSummary":
        return cls(
            credit_code=str(credit.credit_code),
            credit_value=credit.credit_value,
            number_of_installments=credit.number_of_installments,
            status=credit.status.value,
        )
