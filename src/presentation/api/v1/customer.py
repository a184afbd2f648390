"""Customer API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, Response

from src.application.dto import CustomerRequest, CustomerUpdateRequest
from src.application.services import CustomerService
from src.core.dependencies import get_customer_service
from src.presentation.schemas import (
    CustomerRequestSchema,
    CustomerUpdateSchema,
    CustomerViewSchema,
    ErrorResponseSchema,
)

customer_router = APIRouter(
    prefix="/api/customers",
    responses={
        400: {"model": ErrorResponseSchema, "description": "Invalid request"},
        404: {"model": ErrorResponseSchema, "description": "Customer not found"},
    },
)


def _to_schema(view) -> CustomerViewSchema:
    return CustomerViewSchema(
        id=view.id,
        first_name=view.first_name,
        last_name=view.last_name,
        cpf=view.cpf,
        email=view.email,
        income=float(view.income),
        zip_code=view.zip_code,
        street=view.street,
    )


@customer_router.post(
    "",
    response_model=CustomerViewSchema,
    status_code=201,
    summary="Register Customer",
    responses={
        409: {"model": ErrorResponseSchema, "description": "CPF or email already registered"},
    },
)
async def register_customer(
    request: CustomerRequestSchema,
    customer_service: Annotated[CustomerService, Depends(get_customer_service)],
) -> CustomerViewSchema:
    dto = CustomerRequest(
        first_name=request.first_name,
        last_name=request.last_name,
        cpf=request.cpf,
        email=request.email,
        income=request.income,
        password=request.password,
        zip_code=request.zip_code,
        street=request.street,
    )

    view = await customer_service.register(dto)

    return _to_schema(view)


@customer_router.get(
    "/{customer_id}",
    response_model=CustomerViewSchema,
    summary="Get Customer",
)
async def get_customer(
    customer_id: Annotated[int, Path(description="Customer identifier")],
    customer_service: Annotated[CustomerService, Depends(get_customer_service)],
) -> CustomerViewSchema:
    view = await customer_service.get(customer_id)

    return _to_schema(view)


@customer_router.patch(
    "",
    response_model=CustomerViewSchema,
    summary="Update Customer",
    description="Replace the name, income and address of a customer.",
)
async def update_customer(
    customer_id: Annotated[int, Query(alias="customerId", description="Customer identifier")],
    request: CustomerUpdateSchema,
    customer_service: Annotated[CustomerService, Depends(get_customer_service)],
) -> CustomerViewSchema:
    dto = CustomerUpdateRequest(
        first_name=request.first_name,
        last_name=request.last_name,
        income=request.income,
        zip_code=request.zip_code,
        street=request.street,
    )

    view = await customer_service.update(customer_id, dto)

    return _to_schema(view)


@customer_router.delete(
    "/{customer_id}",
    status_code=204,
    summary="Delete Customer",
    description="Delete a customer together with all of its credits.",
)
async def delete_customer(
    customer_id: Annotated[int, Path(description="Customer identifier")],
    customer_service: Annotated[CustomerService, Depends(get_customer_service)],
) -> Response:
    await customer_service.delete(customer_id)

    return Response(status_code=204)
