"""Credit service - orchestrates the credit application use cases."""

from datetime import date
from typing import Callable, List
from uuid import UUID

import structlog

from src.application.dto import CreditRequest, CreditSummary, CreditView
from src.application.validation import validate_credit_request
from src.core.config import Settings, settings
from src.core.metrics import (
    record_credit_created,
    record_credit_rejected,
    track_operation_latency,
)
from src.domain.exceptions import (
    CreditNotFoundException,
    CreditOwnershipException,
    CustomerNotFoundException,
    RequestValidationException,
)
from src.domain.interfaces import CreditRepository, CustomerRepository

logger = structlog.get_logger(__name__)


class CreditService:
    """
    Application service for credit use cases.
    """

    def __init__(
        self,
        credit_repository: CreditRepository,
        customer_repository: CustomerRepository,
        rules: Settings = settings,
        today: Callable[[], date] = date.today,
    ):
        self._credit_repo = credit_repository
        self._customer_repo = customer_repository
        self._rules = rules
        self._today = today

    async def create_credit(self, request: CreditRequest) -> CreditView:
        """
        Validate and persist a new credit for an existing customer.

        Args:
            request: The credit request

        Returns:
            CreditView with the credit and the owner's email and income

        Raises:
            RequestValidationException: If any field constraint is violated
            CustomerNotFoundException: If the customer does not exist
        """
        log = logger.bind(
            customer_id=request.customer_id,
            number_of_installments=request.number_of_installments,
        )

        errors = validate_credit_request(request, today=self._today(), rules=self._rules)
        if errors:
            record_credit_rejected("validation")
            log.info("credit_rejected", errors=[str(error) for error in errors])
            raise RequestValidationException(errors)

        with track_operation_latency("create_credit"):
            customer = await self._customer_repo.get_by_id(request.customer_id)
            if customer is None:
                record_credit_rejected("customer_not_found")
                log.warning("credit_customer_not_found")
                raise CustomerNotFoundException(request.customer_id)

            credit = await self._credit_repo.save(request.to_entity())

        record_credit_created(credit.status.value, credit.credit_value)
        log.info(
            "credit_created",
            credit_code=str(credit.credit_code),
            credit_value=str(credit.credit_value),
        )

        return CreditView.from_entity(credit, customer)

    async def list_credits_by_customer(self, customer_id: int) -> List[CreditSummary]:
        """
        Retrieve all credits of a customer, oldest first.

        Args:
            customer_id: The customer's identifier

        Returns:
            List of CreditSummary objects, empty if the customer has none
        """
        with track_operation_latency("list_credits"):
            credits = await self._credit_repo.get_by_customer_id(customer_id)

        logger.info(
            "customer_credits_retrieved",
            customer_id=customer_id,
            count=len(credits),
        )

        return [CreditSummary.from_entity(credit) for credit in credits]

    async def get_credit(self, customer_id: int, credit_code: UUID) -> CreditView:
        """
        Retrieve one credit on behalf of its owner.

        Raises:
            CreditNotFoundException: If no credit has this code
            CreditOwnershipException: If the credit belongs to another customer
        """
        credit = await self._credit_repo.get_by_credit_code(credit_code)
        if credit is None:
            logger.warning("credit_not_found", credit_code=str(credit_code))
            raise CreditNotFoundException(str(credit_code))

        if not credit.belongs_to(customer_id):
            logger.warning(
                "credit_ownership_mismatch",
                credit_code=str(credit_code),
                customer_id=customer_id,
            )
            raise CreditOwnershipException(str(credit_code), customer_id)

        customer = await self._customer_repo.get_by_id(credit.customer_id)
        if customer is None:
            raise CustomerNotFoundException(credit.customer_id)

        return CreditView.from_entity(credit, customer)
