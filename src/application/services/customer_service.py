"""Customer service - handles registration and maintenance of customers."""

import structlog

from src.application.dto import CustomerRequest, CustomerUpdateRequest, CustomerView
from src.application.validation import validate_customer_request, validate_customer_update
from src.core.metrics import record_customer_registered
from src.domain.entities import Customer
from src.domain.exceptions import (
    CustomerAlreadyExistsException,
    CustomerNotFoundException,
    RequestValidationException,
)
from src.domain.interfaces import CustomerRepository

logger = structlog.get_logger(__name__)


class CustomerService:
    """
    Application service for customer use cases.

    Handles registration, retrieval, update and removal.
    """

    def __init__(self, customer_repository: CustomerRepository):
        self._customer_repo = customer_repository

    async def register(self, request: CustomerRequest) -> CustomerView:
        """
        Register a new customer.

        Raises:
            RequestValidationException: If any field constraint is violated
            CustomerAlreadyExistsException: If the CPF or email is taken
        """
        errors = validate_customer_request(request)
        if errors:
            raise RequestValidationException(errors)

        customer = request.to_entity()

        if await self._customer_repo.get_by_cpf(customer.cpf) is not None:
            raise CustomerAlreadyExistsException("cpf", customer.cpf)
        if await self._customer_repo.get_by_email(customer.email) is not None:
            raise CustomerAlreadyExistsException("email", customer.email)

        customer = await self._customer_repo.save(customer)
        record_customer_registered()

        logger.info("customer_registered", customer_id=customer.id)

        return CustomerView.from_entity(customer)

    async def get(self, customer_id: int) -> CustomerView:
        """Retrieve a customer by id."""
        customer = await self._get_customer(customer_id)
        return CustomerView.from_entity(customer)

    async def update(self, customer_id: int, request: CustomerUpdateRequest) -> CustomerView:
        """
        Replace the name, income and address of a customer.

        Raises:
            RequestValidationException: If any field constraint is violated
            CustomerNotFoundException: If the customer does not exist
        """
        errors = validate_customer_update(request)
        if errors:
            raise RequestValidationException(errors)

        customer = await self._get_customer(customer_id)
        customer = await self._customer_repo.save(request.apply_to(customer))

        logger.info("customer_updated", customer_id=customer_id)

        return CustomerView.from_entity(customer)

    async def delete(self, customer_id: int) -> None:
        """Delete a customer and every credit it owns."""
        await self._get_customer(customer_id)
        await self._customer_repo.delete(customer_id)

        logger.info("customer_deleted", customer_id=customer_id)

    async def _get_customer(self, customer_id: int) -> Customer:
        customer = await self._customer_repo.get_by_id(customer_id)

        if customer is None:
            logger.warning("customer_not_found", customer_id=customer_id)
            raise CustomerNotFoundException(customer_id)

        return customer
