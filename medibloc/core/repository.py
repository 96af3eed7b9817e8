"""
Repository contract used by the generic controller, and the SQLAlchemy
implementation behind every resource.

The contract is five async calls plus an optional ``count``:
a repository advertises it simply by having the method, and the controller
checks that once at construction time.
"""
from __future__ import annotations

from collections.abc import Mapping
from contextlib import contextmanager
from typing import Any, Generic, Iterator, Protocol, TypeVar, runtime_checkable

from pydantic import BaseModel
from pydantic import ValidationError as SchemaValidationError
from sqlalchemy import func, select
from sqlalchemy.orm import Session, sessionmaker
from starlette.concurrency import run_in_threadpool

from medibloc.db.base import Base
from medibloc.schemas.validation import ValidationError


T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


class InvalidPayload(ValueError):
    """A create/update payload the resource schema could not coerce."""

    def __init__(self, errors: list[ValidationError]):
        super().__init__("; ".join(f"{e.field}: {e.message}" for e in errors))
        self.errors = errors


def coerce_payload(schema: type[BaseModel], data: Mapping[str, Any]) -> BaseModel:
    try:
        return schema.model_validate(data)
    except SchemaValidationError as exc:
        raise InvalidPayload([
            ValidationError(
                field=".".join(str(p) for p in err["loc"]) or "body",
                code="type",
                message=err["msg"],
            )
            for err in exc.errors()
        ]) from exc


@runtime_checkable
class Repository(Protocol[T_co]):
    async def find_many(
        self,
        *,
        where: Mapping[str, Any] | None = None,
        skip: int | None = None,
        take: int | None = None,
    ) -> list[T_co]: ...

    async def find_unique(self, id: int) -> T_co | None: ...

    async def create(self, data: Mapping[str, Any]) -> T_co: ...

    async def update(self, id: int, data: Mapping[str, Any]) -> T_co | None: ...

    async def delete(self, id: int) -> T_co | None: ...


@runtime_checkable
class CountableRepository(Repository[T_co], Protocol[T_co]):
    async def count(self, *, where: Mapping[str, Any] | None = None) -> int: ...


class SqlAlchemyRepository(Generic[T]):
    """
    Generic table-backed repository.

    - payloads are coerced through ``create_schema`` / ``update_schema``
      (camelCase or snake_case keys, unknown keys dropped)
    - entities leave the session as ``out_schema`` instances
    - one short-lived session per call, run in the thread pool, so two calls
      from the same request can run side by side
    """

    def __init__(
        self,
        *,
        model: type[Base],
        out_schema: type[BaseModel],
        create_schema: type[BaseModel],
        update_schema: type[BaseModel],
        session_factory: sessionmaker,
        order_by: str = "id",
    ):
        self.model = model
        self.out_schema = out_schema
        self.create_schema = create_schema
        self.update_schema = update_schema
        self.session_factory = session_factory
        self.order_by = order_by

    # ---------- plumbing ----------

    @contextmanager
    def session(self) -> Iterator[Session]:
        db = self.session_factory()
        try:
            yield db
            db.commit()
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    def to_out(self, obj: Any) -> T:
        return self.out_schema.model_validate(obj)

    def _filters(self, where: Mapping[str, Any] | None) -> list:
        clauses = []
        for key, value in (where or {}).items():
            column = getattr(self.model, key, None)
            if column is None:
                raise ValueError(f"Unknown filter field: {key}")
            clauses.append(column == value)
        return clauses

    def _create_values(self, data: Mapping[str, Any]) -> dict[str, Any]:
        return coerce_payload(self.create_schema, data).model_dump()

    def _update_values(self, data: Mapping[str, Any]) -> dict[str, Any]:
        return coerce_payload(self.update_schema, data).model_dump(exclude_unset=True)

    # ---------- sync work ----------

    def _find_many(self, where, skip, take) -> list[T]:
        with self.session() as db:
            stmt = select(self.model).where(*self._filters(where)).order_by(getattr(self.model, self.order_by))
            if skip:
                stmt = stmt.offset(skip)
            if take is not None:
                stmt = stmt.limit(take)
            rows = db.scalars(stmt).unique().all()
            return [self.to_out(r) for r in rows]

    def _count(self, where) -> int:
        with self.session() as db:
            stmt = select(func.count()).select_from(self.model).where(*self._filters(where))
            return db.scalar(stmt) or 0

    def _find_unique(self, id: int) -> T | None:
        with self.session() as db:
            obj = db.get(self.model, id)
            return self.to_out(obj) if obj else None

    def _create(self, data: Mapping[str, Any]) -> T:
        values = self._create_values(data)
        with self.session() as db:
            obj = self.model(**values)
            db.add(obj)
            db.flush()
            db.refresh(obj)
            return self.to_out(obj)

    def _update(self, id: int, data: Mapping[str, Any]) -> T | None:
        values = self._update_values(data)
        with self.session() as db:
            obj = db.get(self.model, id)
            if not obj:
                return None
            for key, value in values.items():
                setattr(obj, key, value)
            db.flush()
            db.refresh(obj)
            return self.to_out(obj)

    def _delete(self, id: int) -> T | None:
        with self.session() as db:
            obj = db.get(self.model, id)
            if not obj:
                return None
            out = self.to_out(obj)
            db.delete(obj)
            return out

    # ---------- async contract ----------

    async def find_many(self, *, where=None, skip=None, take=None) -> list[T]:
        return await run_in_threadpool(self._find_many, where, skip, take)

    async def count(self, *, where=None) -> int:
        return await run_in_threadpool(self._count, where)

    async def find_unique(self, id: int) -> T | None:
        return await run_in_threadpool(self._find_unique, id)

    async def create(self, data: Mapping[str, Any]) -> T:
        return await run_in_threadpool(self._create, data)

    async def update(self, id: int, data: Mapping[str, Any]) -> T | None:
        return await run_in_threadpool(self._update, id, data)

    async def delete(self, id: int) -> T | None:
        return await run_in_threadpool(self._delete, id)
