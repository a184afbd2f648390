"""Repository interfaces for data persistence."""

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import Credit, Customer


class CustomerRepository(ABC):
    """
    Abstract repository for Customer persistence.

    Implementations may use PostgreSQL, in-memory storage, etc.
    """

    @abstractmethod
    async def save(self, customer: Customer) -> Customer:
        """
        Persist a new customer or the changes to an existing one.

        Args:
            customer: The customer to save

        Returns:
            The saved customer with its id populated
        """
        ...

    @abstractmethod
    async def get_by_id(self, customer_id: int) -> Optional[Customer]:
        """
        Retrieve a customer by id.

        Returns:
            The customer if found, None otherwise
        """
        ...

    @abstractmethod
    async def get_by_cpf(self, cpf: str) -> Optional[Customer]:
        """Retrieve a customer by CPF."""
        ...

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[Customer]:
        """Retrieve a customer by email."""
        ...

    @abstractmethod
    async def delete(self, customer_id: int) -> None:
        """
        Delete a customer together with the credits it owns.

        Args:
            customer_id: The customer's identifier
        """
        ...

    @abstractmethod
    async def delete_all(self) -> None:
        """Delete every customer and, with them, every credit."""
        ...


class CreditRepository(ABC):
    """
    Abstract repository for Credit persistence.

    Implementations may use PostgreSQL, in-memory storage, etc.
    """

    @abstractmethod
    async def save(self, credit: Credit) -> Credit:
        """
        Persist a credit.

        Args:
            credit: The credit to save

        Returns:
            The saved credit with its id populated
        """
        ...

    @abstractmethod
    async def get_by_credit_code(self, credit_code: UUID) -> Optional[Credit]:
        """
        Retrieve a credit by its public code.

        Returns:
            The credit if found, None otherwise
        """
        ...

    @abstractmethod
    async def get_by_customer_id(self, customer_id: int) -> List[Credit]:
        """
        Retrieve all credits owned by a customer.

        Returns:
            List of credits in insertion order, empty if there are none
        """
        ...

    @abstractmethod
    async def delete_all(self) -> None:
        """Delete every credit."""
        ...
