"""
The generic controller against in-memory repositories, no database.
"""
import asyncio

import pytest

from medibloc.controllers.generic import GenericController
from medibloc.core.repository import InvalidPayload
from medibloc.schemas.validation import ValidationError


class MemoryRepo:
    """Minimal repository without ``count``."""

    def __init__(self, items=None):
        self.items = {i["id"]: dict(i) for i in (items or [])}
        self.next_id = max(self.items, default=0) + 1
        self.calls = []

    async def find_many(self, *, where=None, skip=None, take=None):
        self.calls.append(("find_many", skip, take))
        rows = [r for r in self.items.values() if all(r.get(k) == v for k, v in (where or {}).items())]
        rows.sort(key=lambda r: r["id"])
        start = skip or 0
        end = None if take is None else start + take
        return rows[start:end]

    async def find_unique(self, id):
        return self.items.get(id)

    async def create(self, data):
        row = {"id": self.next_id, **data}
        self.items[row["id"]] = row
        self.next_id += 1
        return row

    async def update(self, id, data):
        if id not in self.items:
            return None
        self.items[id].update(data)
        return self.items[id]

    async def delete(self, id):
        return self.items.pop(id, None)


class CountingRepo(MemoryRepo):
    async def count(self, *, where=None):
        self.calls.append(("count",))
        return len(self.items)


class BrokenRepo(CountingRepo):
    async def find_unique(self, id):
        raise RuntimeError("database is down")

    async def create(self, data):
        raise RuntimeError("database is down")

    async def count(self, *, where=None):
        raise RuntimeError("database is down")


class StrictRepo(CountingRepo):
    """Rejects payloads the way the SQLAlchemy repository does when coercion fails."""

    async def create(self, data):
        raise InvalidPayload([ValidationError(field="patientId", code="type", message="Input should be a valid integer")])

    async def update(self, id, data):
        raise InvalidPayload([ValidationError(field="birthDate", code="type", message="Input should be a valid date")])


def rows(n):
    return [{"id": i, "name": f"item {i}"} for i in range(1, n + 1)]


def run(coro):
    return asyncio.run(coro)


# ---------- list ----------

def test_list_second_page_of_25():
    c = GenericController(CountingRepo(rows(25)))
    result = run(c.list(page="2", limit="10"))

    assert result.status_code == 200
    assert result.body["success"] is True
    inner = result.body["data"]
    assert inner["success"] is True
    assert inner["pagination"] == {"page": 2, "limit": 10, "total": 25, "totalPages": 3}
    assert [r["id"] for r in inner["data"]] == list(range(11, 21))


def test_list_is_stable_on_unchanged_repository():
    c = GenericController(CountingRepo(rows(12)))
    first = run(c.list(page=1, limit=10))
    second = run(c.list(page=1, limit=10))
    assert first.body == second.body


def test_list_defaults_and_bad_params():
    c = GenericController(CountingRepo(rows(3)))
    result = run(c.list(page="abc", limit="-5"))
    assert result.body["data"]["pagination"]["page"] == 1
    assert result.body["data"]["pagination"]["limit"] == 10


def test_list_page_past_the_end_is_empty():
    c = GenericController(CountingRepo(rows(5)))
    result = run(c.list(page=4, limit=10))
    assert result.body["data"]["data"] == []
    assert result.body["data"]["pagination"]["total"] == 5


def test_list_without_count_falls_back_to_full_scan(caplog):
    repo = MemoryRepo(rows(7))
    c = GenericController(repo)
    assert c.can_count is False

    result = run(c.list(page=1, limit=5))
    assert result.body["data"]["pagination"]["total"] == 7
    assert len(result.body["data"]["data"]) == 5
    assert ("find_many", None, None) in repo.calls
    assert "no count()" in caplog.text


def test_list_with_count_does_not_scan():
    repo = CountingRepo(rows(7))
    c = GenericController(repo)
    assert c.can_count is True
    run(c.list(page=1, limit=5))
    assert ("count",) in repo.calls
    assert ("find_many", None, None) not in repo.calls


def test_list_repository_failure_is_500():
    c = GenericController(BrokenRepo(rows(2)), expose_errors=True)
    result = run(c.list())
    assert result.status_code == 500
    assert result.body == {"success": False, "error": "database is down"}


# ---------- get_one ----------

@pytest.mark.parametrize("raw_id", ["0", "-1", "abc", "", None])
def test_get_one_rejects_bad_ids(raw_id):
    c = GenericController(CountingRepo(rows(1)))
    result = run(c.get_one(raw_id))
    assert result.status_code == 400
    assert result.body == {"success": False, "error": "invalid identifier"}


def test_get_one_found():
    c = GenericController(CountingRepo(rows(1)))
    result = run(c.get_one("1"))
    assert result.status_code == 200
    assert result.body == {"success": True, "data": {"id": 1, "name": "item 1"}}


def test_get_one_missing_is_404_not_400():
    c = GenericController(CountingRepo(rows(1)))
    result = run(c.get_one("999999"))
    assert result.status_code == 404
    assert result.body == {"success": False, "error": "resource not found"}


def test_get_one_repository_failure_hides_detail_in_production_mode():
    c = GenericController(BrokenRepo(rows(1)), expose_errors=False)
    result = run(c.get_one("1"))
    assert result.status_code == 500
    assert result.body == {"success": False, "error": "internal error"}


# ---------- create / update / delete ----------

def test_create_returns_201():
    repo = CountingRepo()
    c = GenericController(repo)
    result = run(c.create({"name": "fresh"}))
    assert result.status_code == 201
    assert result.body == {"success": True, "data": {"id": 1, "name": "fresh"}, "message": "created"}
    assert repo.items[1]["name"] == "fresh"


def test_create_failure_is_500_with_message():
    c = GenericController(BrokenRepo(), expose_errors=True)
    result = run(c.create({"name": "x"}))
    assert result.status_code == 500
    assert result.body["error"] == "database is down"


def test_create_uncoercible_payload_is_400():
    result = run(GenericController(StrictRepo()).create({"patientId": 1.5}))
    assert result.status_code == 400
    assert result.body == {
        "success": False,
        "error": "invalid validation data",
        "details": [{"field": "patientId", "code": "type", "message": "Input should be a valid integer"}],
    }


def test_update_uncoercible_payload_is_400():
    result = run(GenericController(StrictRepo(rows(1))).update("1", {"birthDate": "soon"}))
    assert result.status_code == 400
    assert result.body["details"][0]["field"] == "birthDate"


def test_update_found_and_missing():
    c = GenericController(CountingRepo(rows(1)))

    ok = run(c.update("1", {"name": "renamed"}))
    assert ok.status_code == 200
    assert ok.body["data"]["name"] == "renamed"
    assert ok.body["message"] == "updated"

    missing = run(c.update("5", {"name": "x"}))
    assert missing.status_code == 404

    bad = run(c.update("x", {"name": "x"}))
    assert bad.status_code == 400


def test_delete_existing():
    repo = CountingRepo(rows(2))
    c = GenericController(repo)
    result = run(c.delete("2"))
    assert result.status_code == 200
    assert result.body == {"success": True, "message": "deleted"}
    assert 2 not in repo.items


def test_delete_already_deleted_is_404():
    c = GenericController(CountingRepo(rows(1)))
    run(c.delete("1"))
    result = run(c.delete("1"))
    assert result.status_code == 404
    assert result.body == {"success": False, "error": "resource not found"}


# ---------- filtered lists ----------

def test_list_related_filters_and_validates_id():
    repo = CountingRepo([
        {"id": 1, "patient_id": 1},
        {"id": 2, "patient_id": 2},
        {"id": 3, "patient_id": 1},
    ])
    c = GenericController(repo)

    result = run(c.list_related("patient_id", "1"))
    assert result.status_code == 200
    assert [r["id"] for r in result.body["data"]] == [1, 3]

    assert run(c.list_related("patient_id", "zero")).status_code == 400


def test_list_where_empty_result_is_success():
    c = GenericController(CountingRepo(rows(2)))
    result = run(c.list_where({"name": "nope"}))
    assert result.body == {"success": True, "data": []}
