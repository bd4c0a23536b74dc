from collections.abc import Iterable
from typing import Any, TypeVar

from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from gymlog.core.exceptions import NotFoundError, ValidationError
from gymlog.repositories.base import Repository

T = TypeVar("T")


class BaseService:
    def __init__(self, session: AsyncSession):
        self._session = session

    async def _get_or_404(self, repository: Repository[T, Any], id: int, error_msg: str | None = None) -> T:
        result = await repository.get(id)
        if not result:
            entity_name = repository.model.__name__
            raise NotFoundError(
                entity_name,
                error_msg or f"{entity_name} {id} not found",
                {"id": id}
            )
        return result

    @staticmethod
    def _collect_updates(data: BaseModel, required: Iterable[str] = ()) -> dict[str, Any]:
        """Fields the caller actually sent; required columns may not be cleared."""
        updates = data.model_dump(exclude_unset=True)
        for field in required:
            if field in updates and updates[field] is None:
                raise ValidationError(field, "cannot be set to null")
        return updates
