"""Credit API endpoints."""

from typing import Annotated, List
from uuid import UUID

from fastapi import APIRouter, Depends, Path, Query

from src.application.dto import CreditRequest
from src.application.services import CreditService
from src.core.dependencies import get_credit_service
from src.presentation.schemas import (
    CreditRequestSchema,
    CreditSummarySchema,
    CreditViewSchema,
    ErrorResponseSchema,
)

credit_router = APIRouter(
    prefix="/api/credits",
    responses={
        400: {"model": ErrorResponseSchema, "description": "Invalid request"},
        404: {"model": ErrorResponseSchema, "description": "Customer or credit not found"},
    },
)


def _to_view_schema(view) -> CreditViewSchema:
    return CreditViewSchema(
        credit_code=view.credit_code,
        credit_value=float(view.credit_value),
        number_of_installment=view.number_of_installment,
        status=view.status,
        email_customer=view.email_customer,
        income_customer=float(view.income_customer),
    )


@credit_router.post(
    "",
    response_model=CreditViewSchema,
    status_code=201,
    summary="Create Credit",
    description="""
    Apply for credit on behalf of an existing customer.

    The installment count and the first installment date must fall
    within the configured credit rules. Money values carry at most two
    decimal places.
    """,
    responses={
        201: {"description": "Credit created"},
    },
)
async def create_credit(
    request: CreditRequestSchema,
    credit_service: Annotated[CreditService, Depends(get_credit_service)],
) -> CreditViewSchema:
    dto = CreditRequest(
        credit_value=request.credit_value,
        day_first_installment=request.day_first_of_installment,
        number_of_installments=request.number_of_installments,
        customer_id=request.customer_id,
    )

    view = await credit_service.create_credit(dto)

    return _to_view_schema(view)


@credit_router.get(
    "",
    response_model=List[CreditSummarySchema],
    summary="List Customer Credits",
    description="Retrieve every credit of a customer, oldest first.",
    responses={
        200: {"description": "Credits retrieved successfully"},
    },
)
async def list_credits(
    customer_id: Annotated[
        int,
        Query(alias="customerId", description="Customer whose credits are listed"),
    ],
    credit_service: Annotated[CreditService, Depends(get_credit_service)],
) -> List[CreditSummarySchema]:
    summaries = await credit_service.list_credits_by_customer(customer_id)

    return [
        CreditSummarySchema(
            credit_code=summary.credit_code,
            credit_value=float(summary.credit_value),
            number_of_installments=summary.number_of_installments,
            status=summary.status,
        )
        for summary in summaries
    ]


@credit_router.get(
    "/{credit_code}",
    response_model=CreditViewSchema,
    summary="Get Credit",
    description="Retrieve one credit by its code on behalf of its owner.",
    responses={
        200: {"description": "Credit retrieved successfully"},
    },
)
async def get_credit(
    credit_code: Annotated[UUID, Path(description="UUID of the credit")],
    customer_id: Annotated[
        int,
        Query(alias="customerId", description="Customer that owns the credit"),
    ],
    credit_service: Annotated[CreditService, Depends(get_credit_service)],
) -> CreditViewSchema:
    view = await credit_service.get_credit(customer_id, credit_code)

    return _to_view_schema(view)
