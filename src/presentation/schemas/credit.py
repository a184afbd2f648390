"""Credit-related Pydantic schemas."""

from datetime import date
from decimal import Decimal

from pydantic import ConfigDict, Field

from .base import CamelSchema


class CreditRequestSchema(CamelSchema):
    """Schema for POST /api/credits request body."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "creditValue": 1000.0,
                    "dayFirstOfInstallment": "2026-12-17",
                    "numberOfInstallments": 10,
                    "customerId": 1,
                }
            ]
        }
    )

    credit_value: Decimal = Field(
        ...,
        max_digits=14,
        decimal_places=2,
        description="Requested credit value",
        examples=[1000.0],
    )
    day_first_of_installment: date = Field(
        ...,
        description="Due date of the first installment (YYYY-MM-DD)",
        examples=["2026-12-17"],
    )
    number_of_installments: int = Field(
        ...,
        description="Number of installments",
        examples=[10],
    )
    customer_id: int = Field(
        ...,
        description="Identifier of the customer applying for credit",
        examples=[1],
    )


class CreditViewSchema(CamelSchema):
    """Schema for a single credit with its owner's email and income."""

    credit_code: str = Field(
        ...,
        description="UUID of the credit",
    )
    credit_value: float = Field(
        ...,
        description="Credit value",
        examples=[1000.0],
    )
    number_of_installment: int = Field(
        ...,
        description="Number of installments",
        examples=[10],
    )
    status: str = Field(
        ...,
        description="Credit status",
        examples=["IN_PROGRESS"],
    )
    email_customer: str = Field(
        ...,
        description="Email of the owning customer",
        examples=["felipe@teste.com"],
    )
    income_customer: float = Field(
        ...,
        description="Income of the owning customer",
        examples=[3000.0],
    )


class CreditSummarySchema(CamelSchema):
    """Schema for a credit in GET /api/credits listings."""

    credit_code: str = Field(
        ...,
        description="UUID of the credit",
    )
    credit_value: float = Field(
        ...,
        description="Credit value",
    )
    number_of_installments: int = Field(
        ...,
        description="Number of installments",
    )
    status: str = Field(
        ...,
        description="Credit status",
    )
