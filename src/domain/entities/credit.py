"""Credit entity representing a customer's credit application."""

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Optional
from uuid import UUID, uuid4


class CreditStatus(str, Enum):
    IN_PROGRESS = "IN_PROGRESS"
    APPROVED = "APPROVED"
    REJECT = "REJECT"


@dataclass
class Credit:
    """
    A credit owned by exactly one customer.

    ``credit_code`` is the public identifier handed to clients; ``id`` is
    the store's surrogate key and is populated on save.
    """

    credit_value: Decimal
    day_first_installment: date
    number_of_installments: int
    customer_id: int
    credit_code: UUID = field(default_factory=uuid4)
    status: CreditStatus = CreditStatus.IN_PROGRESS
    id: Optional[int] = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def belongs_to(self, customer_id: int) -> bool:
        return self.customer_id == customer_id
