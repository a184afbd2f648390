"""Customer-related Pydantic schemas."""

from decimal import Decimal

from pydantic import ConfigDict, Field

from .base import CamelSchema


class CustomerRequestSchema(CamelSchema):
    """Schema for POST /api/customers request body."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "firstName": "Felipe",
                    "lastName": "Fruhauf",
                    "cpf": "12345678910",
                    "email": "felipe@teste.com",
                    "income": 3000.0,
                    "password": "123456",
                    "zipCode": "99555000",
                    "street": "Rua dos Testes",
                }
            ]
        }
    )

    first_name: str = Field(..., description="First name")
    last_name: str = Field(..., description="Last name")
    cpf: str = Field(..., description="Brazilian taxpayer number (11 digits)")
    email: str = Field(..., description="Email address, unique per customer")
    income: Decimal = Field(
        ..., max_digits=14, decimal_places=2, description="Monthly income"
    )
    password: str = Field(..., description="Credential, never returned")
    zip_code: str = Field(..., description="Postal code")
    street: str = Field(..., description="Street address")


class CustomerUpdateSchema(CamelSchema):
    """Schema for PATCH /api/customers request body."""

    first_name: str = Field(..., description="First name")
    last_name: str = Field(..., description="Last name")
    income: Decimal = Field(
        ..., max_digits=14, decimal_places=2, description="Monthly income"
    )
    zip_code: str = Field(..., description="Postal code")
    street: str = Field(..., description="Street address")


class CustomerViewSchema(CamelSchema):
    """Schema for customer responses."""

    id: int = Field(..., description="Customer identifier")
    first_name: str
    last_name: str
    cpf: str
    email: str
    income: float
    zip_code: str
    street: str
