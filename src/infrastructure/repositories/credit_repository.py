"""PostgreSQL repository implementation for credits."""

from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities import Credit, CreditStatus
from src.domain.interfaces import CreditRepository
from src.infrastructure.database.models import CreditModel


class PostgresCreditRepository(CreditRepository):
    """PostgreSQL-backed credit repository."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def save(self, credit: Credit) -> Credit:
        model = CreditModel(
            credit_code=str(credit.credit_code),
            credit_value=credit.credit_value,
            day_first_installment=credit.day_first_installment,
            number_of_installments=credit.number_of_installments,
            status=credit.status.value,
            customer_id=credit.customer_id,
            created_at=credit.created_at,
        )

        self._session.add(model)
        await self._session.flush()

        credit.id = model.id
        return credit

    async def get_by_credit_code(self, credit_code: UUID) -> Optional[Credit]:
        stmt = select(CreditModel).where(CreditModel.credit_code == str(credit_code))
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_entity(model)

    async def get_by_customer_id(self, customer_id: int) -> List[Credit]:
        stmt = (
            select(CreditModel)
            .where(CreditModel.customer_id == customer_id)
            .order_by(CreditModel.id.asc())
        )
        result = await self._session.execute(stmt)
        models = result.scalars().all()

        return [self._to_entity(model) for model in models]

    async def delete_all(self) -> None:
        await self._session.execute(delete(CreditModel))
        await self._session.flush()

    def _to_entity(self, model: CreditModel) -> Credit:
        return Credit(
            id=model.id,
            credit_code=UUID(model.credit_code),
            credit_value=model.credit_value,
            day_first_installment=model.day_first_installment,
            number_of_installments=model.number_of_installments,
            status=CreditStatus(model.status),
            customer_id=model.customer_id,
            created_at=model.created_at,
        )
