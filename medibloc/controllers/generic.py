"""
Generic CRUD handlers over any ``Repository``.

Every operation has the same shape: check the trivial preconditions (id
format), call the repository once or twice, and turn the outcome into an
envelope: success, not found, rejected payload (400) or error (500).
Repository exceptions never leave an operation.
"""
from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping
from typing import Any, Awaitable, Callable, Generic, TypeVar

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from medibloc.core.config import settings
from medibloc.core.pagination import (
    pagination_window,
    parse_identifier,
    resolve_page_params,
    total_pages,
)
from medibloc.core.repository import CountableRepository, InvalidPayload, Repository
from medibloc.core.request_validation import INVALID_DATA
from medibloc.schemas.common import PaginatedResponse, PaginationMeta

logger = logging.getLogger(__name__)

T = TypeVar("T")

INVALID_ID = "invalid identifier"
NOT_FOUND = "resource not found"
INTERNAL_ERROR = "internal error"


class ApiResult(BaseModel):
    """Status code plus a JSON-ready envelope."""
    status_code: int
    body: dict[str, Any]

    @classmethod
    def success(cls, data: Any = None, *, status_code: int = 200, message: str | None = None) -> "ApiResult":
        body: dict[str, Any] = {"success": True}
        if data is not None:
            body["data"] = jsonable_encoder(data)
        if message:
            body["message"] = message
        return cls(status_code=status_code, body=body)

    @classmethod
    def failure(cls, status_code: int, error: str, details: Any | None = None) -> "ApiResult":
        body: dict[str, Any] = {"success": False, "error": error}
        if details is not None:
            body["details"] = jsonable_encoder(details)
        return cls(status_code=status_code, body=body)

    def to_response(self) -> JSONResponse:
        return JSONResponse(status_code=self.status_code, content=self.body)


class GenericController(Generic[T]):
    """
    Usage:
      patients = GenericController(patient_repo, resource="patient")
      result = await patients.get_one("12")
      return result.to_response()
    """

    def __init__(
        self,
        repository: Repository[T],
        *,
        resource: str = "resource",
        expose_errors: bool | None = None,
    ):
        self.repo = repository
        self.resource = resource
        self.expose_errors = (not settings.is_production) if expose_errors is None else expose_errors
        self.can_count = isinstance(repository, CountableRepository)

    # ---------- helpers ----------

    def repository_failure(self, exc: Exception, operation: str) -> ApiResult:
        logger.exception("%s %s failed", self.resource, operation)
        message = str(exc) if self.expose_errors else ""
        return ApiResult.failure(500, message or INTERNAL_ERROR)

    def invalid_payload(self, exc: InvalidPayload) -> ApiResult:
        logger.info("%s payload rejected by schema: %s", self.resource, exc)
        return ApiResult.failure(400, INVALID_DATA, [e.model_dump() for e in exc.errors])

    async def _total(self) -> int:
        if self.can_count:
            return await self.repo.count(where=None)
        logger.warning(
            "%s repository has no count(); scanning every row to compute the total", self.resource
        )
        return len(await self.repo.find_many())

    async def run_for_id(
        self,
        raw_id: Any,
        call: Callable[[int], Awaitable[Any]],
        *,
        operation: str,
        status_code: int = 200,
        message: str | None = None,
    ) -> ApiResult:
        """Shared id check / not-found / error handling for one-id operations."""
        id = parse_identifier(raw_id)
        if id is None:
            return ApiResult.failure(400, INVALID_ID)
        try:
            result = await call(id)
        except InvalidPayload as exc:
            return self.invalid_payload(exc)
        except Exception as exc:
            return self.repository_failure(exc, operation)
        if result is None:
            return ApiResult.failure(404, NOT_FOUND)
        return ApiResult.success(result, status_code=status_code, message=message)

    # ---------- operations ----------

    async def list(self, page: Any = None, limit: Any = None) -> ApiResult:
        page_num, limit_num = resolve_page_params(page, limit)
        skip, take = pagination_window(page_num, limit_num)

        try:
            items, total = await asyncio.gather(
                self.repo.find_many(skip=skip, take=take),
                self._total(),
            )
        except Exception as exc:
            return self.repository_failure(exc, "list")

        paginated = PaginatedResponse[Any](
            data=items,
            pagination=PaginationMeta(
                page=page_num,
                limit=limit_num,
                total=total,
                total_pages=total_pages(total, limit_num),
            ),
        )
        return ApiResult.success(paginated)

    async def get_one(self, raw_id: Any) -> ApiResult:
        return await self.run_for_id(raw_id, self.repo.find_unique, operation="get")

    async def create(self, payload: Mapping[str, Any]) -> ApiResult:
        try:
            created = await self.repo.create(payload)
        except InvalidPayload as exc:
            return self.invalid_payload(exc)
        except Exception as exc:
            return self.repository_failure(exc, "create")
        return ApiResult.success(created, status_code=201, message="created")

    async def update(self, raw_id: Any, payload: Mapping[str, Any]) -> ApiResult:
        async def _update(id: int):
            return await self.repo.update(id, payload)

        return await self.run_for_id(raw_id, _update, operation="update", message="updated")

    async def delete(self, raw_id: Any) -> ApiResult:
        id = parse_identifier(raw_id)
        if id is None:
            return ApiResult.failure(400, INVALID_ID)
        try:
            deleted = await self.repo.delete(id)
        except Exception as exc:
            return self.repository_failure(exc, "delete")
        if deleted is None:
            return ApiResult.failure(404, NOT_FOUND)
        return ApiResult.success(message="deleted")

    async def list_where(self, where: Mapping[str, Any]) -> ApiResult:
        """Unpaginated list for filters the caller already validated."""
        try:
            items = await self.repo.find_many(where=where)
        except Exception as exc:
            return self.repository_failure(exc, "list")
        return ApiResult.success(items)

    async def list_related(self, field: str, raw_id: Any) -> ApiResult:
        """Entities whose ``field`` points at ``raw_id``, e.g. a patient's appointments."""
        id = parse_identifier(raw_id)
        if id is None:
            return ApiResult.failure(400, INVALID_ID)
        return await self.list_where({field: id})
