from __future__ import annotations
from typing import Any, Generic, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

from gymlog.core.pagination import SqlAlchemyPageStore, paginate
from gymlog.schemas.filtering import FilterSpec
from gymlog.schemas.pagination import PaginationParams, PaginatedResult

ModelT = TypeVar("ModelT")
IdT = TypeVar("IdT")


class Repository(Generic[ModelT, IdT]):
    """CRUD plus keyset-paginated listing for one mapped model."""

    model: type[ModelT]

    def __init__(self, session: AsyncSession):
        self._session = session

    async def get(self, id: IdT) -> ModelT | None:
        return await self._session.get(self.model, id)

    async def list(
        self, filter: FilterSpec | None, pagination: PaginationParams
    ) -> PaginatedResult[ModelT]:
        store = SqlAlchemyPageStore(self._session, self.model)
        return await paginate(store, filter, pagination)

    async def create(self, entity: ModelT) -> ModelT:
        self._session.add(entity)
        await self._session.flush()
        await self._session.refresh(entity)
        return entity

    async def update(self, id: IdT, updates: dict[str, Any]) -> ModelT | None:
        entity = await self.get(id)
        if entity:
            for key, value in updates.items():
                setattr(entity, key, value)
            await self._session.flush()
        return entity

    async def delete(self, id: IdT) -> bool:
        entity = await self.get(id)
        if entity:
            await self._session.delete(entity)
            await self._session.flush()
            return True
        return False
