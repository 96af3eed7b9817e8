from __future__ import annotations

import math
import re
from typing import Any

from medibloc.core.config import settings

DEFAULT_PAGE = 1

# ASCII digits only: int() would also take "1_0" and non-Latin digits
INTEGER_STRING = re.compile(r"[+-]?\d+", re.ASCII)


def _parse_int_string(raw: str) -> int | None:
    s = raw.strip()
    if not INTEGER_STRING.fullmatch(s):
        return None
    return int(s)


def parse_positive_int(raw: Any, default: int) -> int:
    """
    Lenient integer parsing for query params: anything that is not a
    positive integer falls back to ``default``.
    """
    if isinstance(raw, bool):
        return default
    if isinstance(raw, int):
        return raw if raw > 0 else default
    if isinstance(raw, str):
        v = _parse_int_string(raw)
        return v if v is not None and v > 0 else default
    return default


def parse_identifier(raw: Any) -> int | None:
    """
    Strict id parsing for path params. None means "not a usable id"
    (missing, non-numeric, zero or negative).
    """
    if isinstance(raw, bool) or raw is None:
        return None
    if isinstance(raw, int):
        return raw if raw > 0 else None
    v = _parse_int_string(str(raw))
    return v if v is not None and v > 0 else None


def resolve_page_params(page: Any, limit: Any) -> tuple[int, int]:
    page_num = parse_positive_int(page, DEFAULT_PAGE)
    limit_num = min(parse_positive_int(limit, settings.DEFAULT_PAGE_LIMIT), settings.MAX_PAGE_LIMIT)
    return page_num, limit_num


def pagination_window(page: int, limit: int) -> tuple[int, int]:
    """(skip, take) for a 1-indexed page."""
    page = max(1, page)
    limit = max(1, limit)
    return (page - 1) * limit, limit


def total_pages(total: int, limit: int) -> int:
    if limit <= 0:
        return 1
    return math.ceil(total / limit)
