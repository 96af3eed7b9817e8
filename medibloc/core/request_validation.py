"""
Request boundary for the validation engine.

``validate_request(schema)`` builds a FastAPI dependency. Routes use it as
the source of their body payload:

    @router.post("")
    async def create_symptom(payload: dict = Depends(validate_request(schemas.CREATE_SYMPTOM))):
        ...

The merged record (body, then path params, then query params) is what gets
validated; the handler only ever receives the body.
"""
import json
import logging
from collections.abc import Mapping
from typing import Any, Iterable

from fastapi import Request

from medibloc.core.errors import ApiError
from medibloc.core.validation import ValidationSchema, validate

logger = logging.getLogger(__name__)

SOURCES = ("body", "path", "query")

INVALID_DATA = "invalid validation data"
VALIDATION_CRASHED = "error while validating data"


async def read_json_body(request: Request) -> dict[str, Any]:
    raw = await request.body()
    if not raw or not raw.strip():
        return {}
    try:
        body = json.loads(raw)
    except ValueError:
        raise ApiError(400, "malformed JSON body")
    if not isinstance(body, dict):
        raise ApiError(400, "request body must be a JSON object")
    return body


def merge_request_sources(
    body: Mapping[str, Any],
    path_params: Mapping[str, Any],
    query_params: Mapping[str, Any],
    sources: Iterable[str] = SOURCES,
) -> dict[str, Any]:
    """
    Later sources win. A path or query key that shadows a body key is
    logged: the handler still sees the body value, only validation sees the
    override.
    """
    by_name = {"body": body, "path": path_params, "query": query_params}
    merged: dict[str, Any] = {}
    for name in sources:
        for key, value in by_name[name].items():
            if key in merged and merged[key] != value:
                logger.warning(
                    "request %s param %r shadows an earlier value during validation", name, key
                )
            merged[key] = value
    return merged


def validate_request(schema: ValidationSchema, *, sources: Iterable[str] = SOURCES):
    """
    Usage:
      Depends(validate_request(schemas.CREATE_PATIENT))
      Depends(validate_request(schemas.LOGIN, sources=("body",)))
    """
    sources = tuple(sources)
    unknown = set(sources) - set(SOURCES)
    if unknown:
        raise ValueError(f"Unknown request sources: {sorted(unknown)}")

    async def _dep(request: Request) -> dict[str, Any]:
        body = await read_json_body(request)
        data = merge_request_sources(
            body,
            dict(request.path_params),
            dict(request.query_params),
            sources,
        )

        try:
            result = validate(schema, data)
        except Exception:
            logger.exception("validation crashed on %s %s", request.method, request.url.path)
            raise ApiError(500, VALIDATION_CRASHED)

        if not result.is_valid:
            raise ApiError(400, INVALID_DATA, [e.model_dump() for e in result.errors])
        return body

    return _dep
