from typing import Optional, Sequence

from sqlalchemy import and_, delete, func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from shipregistry.models.ship import Ship
from shipregistry.services.ship_filter import CONTAINS, EQ, GE, LE, Criterion


def criterion_clause(criterion: Criterion):
    """Translate one criterion into a bound-parameter SQL expression."""
    column = getattr(Ship, criterion.field)
    if criterion.op == CONTAINS:
        # Escape % and _ so the caller's text is matched literally
        return column.contains(criterion.value, autoescape=True)
    if criterion.op == EQ:
        return column == criterion.value
    if criterion.op == GE:
        return column >= criterion.value
    if criterion.op == LE:
        return column <= criterion.value
    raise ValueError(f"Unsupported filter operator: {criterion.op}")


class ShipRepository:
    """Persistence for ships on top of an AsyncSession."""

    def __init__(self, db: AsyncSession) -> None:
        self._db = db

    def _filtered(self, stmt, criteria: Optional[Sequence[Criterion]]):
        if not criteria:
            return stmt
        return stmt.where(and_(*(criterion_clause(c) for c in criteria)))

    async def find_by_id(self, ship_id: int) -> Optional[Ship]:
        return await self._db.get(Ship, ship_id)

    async def save(self, ship: Ship) -> Ship:
        self._db.add(ship)
        await self._db.commit()
        await self._db.refresh(ship)
        return ship

    async def delete_by_id(self, ship_id: int) -> None:
        await self._db.execute(delete(Ship).where(Ship.id == ship_id))
        await self._db.commit()

    async def count(self, criteria: Optional[Sequence[Criterion]] = None) -> int:
        stmt = self._filtered(select(func.count()).select_from(Ship), criteria)
        result = await self._db.execute(stmt)
        return result.scalar_one()

    async def find_page(
        self,
        criteria: Optional[Sequence[Criterion]],
        page_size: int,
        page_number: int,
        sort_field: str,
    ) -> list[Ship]:
        sort_column = getattr(Ship, sort_field)
        stmt = self._filtered(select(Ship), criteria)
        # id breaks ties so consecutive pages never overlap
        stmt = (
            stmt.order_by(sort_column.asc(), Ship.id.asc())
            .offset(page_number * page_size)
            .limit(page_size)
        )
        result = await self._db.execute(stmt)
        return list(result.scalars().all())
