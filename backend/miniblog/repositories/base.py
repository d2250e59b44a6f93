# miniblog/repositories/base.py
"""
Generic record store over a Tortoise ORM model with an integer primary key.

Reads hand back detached model instances: Tortoise keeps no identity map, so
changing a returned object has no effect on the database until it is passed
to update(). Every write runs in its own transaction, which is committed when
the call returns and rolled back (and released) on any exception.
"""
from typing import Generic, Optional, Type, TypeVar

from tortoise.expressions import Q
from tortoise.models import Model
from tortoise.transactions import in_transaction

from miniblog.core.errors import NotFound

T = TypeVar("T", bound=Model)


class RecordStore(Generic[T]):
    def __init__(self, model: Type[T], resource: Optional[str] = None):
        self.model = model
        self.resource = resource or model.__name__  # Name used in NotFound errors

    # ---------- Reads ----------
    async def get_all(self) -> list[T]:
        return await self.model.all().order_by("id")

    async def get_by_id(self, record_id: int) -> Optional[T]:
        return await self.model.get_or_none(id=record_id)

    async def find(self, *predicates: Q, **filters) -> list[T]:
        """
        Records matching a predicate.

        Accepts Tortoise Q objects and/or keyword lookups, e.g.
        find(Q(title__icontains="python") | Q(content__icontains="python"))
        or find(user_id=3).
        """
        return await self.model.filter(*predicates, **filters).order_by("id")

    async def count(self) -> int:
        return await self.model.all().count()

    async def exists(self, record_id: int) -> bool:
        return await self.model.filter(id=record_id).exists()

    # ---------- Writes ----------
    async def add(self, record: T) -> T:
        """Insert a new record; the returned instance carries the assigned id."""
        async with in_transaction() as conn:
            await record.save(using_db=conn, force_create=True)
        return record

    async def update(self, record: T) -> T:
        """
        Replace the stored row with every field of the given record.

        Raises:
            ValueError: If the record has never been assigned an id
            NotFound: If no row with the record's id exists
        """
        if record.pk is None:
            raise ValueError(f"{self.resource} has no id; use add() for new records")
        async with in_transaction() as conn:
            if not await self.model.filter(id=record.pk).using_db(conn).exists():
                raise NotFound(self.resource, record.pk)
            await record.save(using_db=conn, force_update=True)
        return record

    async def delete_by_id(self, record_id: int) -> None:
        """Delete by id; deleting an id that does not exist is a no-op."""
        async with in_transaction() as conn:
            await self.model.filter(id=record_id).using_db(conn).delete()

    async def delete(self, record: T) -> None:
        async with in_transaction() as conn:
            await self.model.filter(id=record.pk).using_db(conn).delete()
