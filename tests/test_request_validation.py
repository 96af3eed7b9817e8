import logging

from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient

from medibloc.core.errors import install_error_handlers
from medibloc.core.request_validation import merge_request_sources, validate_request
from medibloc.core.validation import FieldRule

SCHEMA = {
    "name": FieldRule(required=True, type="string", min_length=2),
    "age": FieldRule(type="number", min=0),
}


def build_client() -> TestClient:
    app = FastAPI()
    install_error_handlers(app)

    @app.post("/things/{thing_id}")
    async def create_thing(thing_id: str, payload: dict = Depends(validate_request(SCHEMA))):
        return {"received": payload}

    @app.post("/body-only/{name}")
    async def body_only(name: str, payload: dict = Depends(validate_request(SCHEMA, sources=("body",)))):
        return {"received": payload}

    def explode(value):
        raise RuntimeError("bad predicate")

    @app.post("/broken")
    async def broken(payload: dict = Depends(validate_request({"x": FieldRule(custom=explode)}))):
        return {"received": payload}

    return TestClient(app)


def test_valid_body_reaches_handler_unchanged():
    r = build_client().post("/things/1", json={"name": "Ann", "age": 30})
    assert r.status_code == 200
    assert r.json() == {"received": {"name": "Ann", "age": 30}}


def test_invalid_body_is_400_with_details():
    r = build_client().post("/things/1", json={"name": "A", "age": -1})
    assert r.status_code == 400
    body = r.json()
    assert body["success"] is False
    assert body["error"] == "invalid validation data"
    assert [d["field"] for d in body["details"]] == ["name", "age"]
    assert body["details"][0]["message"] == "name must contain at least 2 characters"


def test_empty_body_validates_as_empty_record():
    r = build_client().post("/things/1")
    assert r.status_code == 400
    assert r.json()["details"] == [{"field": "name", "code": "required", "message": "name is required"}]


def test_query_params_are_validated_but_not_passed_to_handler():
    r = build_client().post("/things/1?name=Zed", json={})
    assert r.status_code == 200
    assert r.json() == {"received": {}}


def test_body_only_sources_ignore_path_params():
    # the path carries a valid name, the body does not
    r = build_client().post("/body-only/Alice", json={})
    assert r.status_code == 400
    assert r.json()["details"][0]["field"] == "name"


def test_malformed_json_is_400():
    r = build_client().post("/things/1", content=b"{not json", headers={"Content-Type": "application/json"})
    assert r.status_code == 400
    assert r.json() == {"success": False, "error": "malformed JSON body"}


def test_non_object_body_is_400():
    r = build_client().post("/things/1", json=[1, 2])
    assert r.status_code == 400
    assert r.json()["success"] is False


def test_crashing_rule_is_500():
    r = build_client().post("/broken", json={"x": 1})
    assert r.status_code == 500
    assert r.json() == {"success": False, "error": "error while validating data"}


def test_merge_order_and_shadow_warning(caplog):
    caplog.set_level(logging.WARNING)
    merged = merge_request_sources({"id": "1", "name": "a"}, {"id": "2"}, {"q": "x"})
    assert merged == {"id": "2", "name": "a", "q": "x"}
    assert "shadows" in caplog.text


def test_merge_respects_selected_sources():
    merged = merge_request_sources({"a": 1}, {"b": 2}, {"c": 3}, sources=("path",))
    assert merged == {"b": 2}
