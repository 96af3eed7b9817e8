import pytest

from medibloc.core.repository import InvalidPayload, coerce_payload
from medibloc.models.user import User
from medibloc.schemas.patient import PatientUpdate

from tests.helpers import (
    API,
    auth,
    create_appointment,
    create_disease,
    create_doctor,
    create_patient,
)


def test_list_patients_paginated(client, db_session, doctor_user):
    for i in range(12):
        create_patient(db_session, f"p{i}@example.com")

    r = client.get(f"{API}/patients?page=2&limit=5", headers=auth(doctor_user))
    assert r.status_code == 200
    body = r.json()
    assert body["success"] is True
    assert body["data"]["pagination"] == {"page": 2, "limit": 5, "total": 12, "totalPages": 3}
    assert len(body["data"]["data"]) == 5
    assert body["data"]["data"][0]["user"]["email"] == "p5@example.com"


def test_list_patients_ignores_garbage_paging(client, db_session, doctor_user):
    create_patient(db_session, "only@example.com")
    r = client.get(f"{API}/patients?page=zero&limit=-3", headers=auth(doctor_user))
    assert r.status_code == 200
    assert r.json()["data"]["pagination"]["page"] == 1
    assert r.json()["data"]["pagination"]["limit"] == 10


def test_get_patient_id_handling(client, db_session, doctor_user):
    p = create_patient(db_session, "jane@example.com", gender="FEMALE")
    headers = auth(doctor_user)

    ok = client.get(f"{API}/patients/{p.id}", headers=headers)
    assert ok.status_code == 200
    data = ok.json()["data"]
    assert data["id"] == p.id
    assert data["gender"] == "FEMALE"
    assert data["user"]["email"] == "jane@example.com"

    for bad in ("0", "-1", "abc", "1_0"):
        r = client.get(f"{API}/patients/{bad}", headers=headers)
        assert r.status_code == 400, bad
        assert r.json() == {"success": False, "error": "invalid identifier"}

    missing = client.get(f"{API}/patients/999999", headers=headers)
    assert missing.status_code == 404
    assert missing.json() == {"success": False, "error": "resource not found"}


def test_admin_creates_patient_with_user_account(client, db_session, admin):
    payload = {
        "email": "Mary@Example.com",
        "password": "secret1",
        "firstName": "Mary",
        "lastName": "Major",
        "birthDate": "1990-04-12",
        "gender": "FEMALE",
        "phone": "+33 6 00 00 00 00",
    }
    r = client.post(f"{API}/patients", json=payload, headers=auth(admin))
    assert r.status_code == 201, r.text
    body = r.json()
    assert body["message"] == "created"
    data = body["data"]
    assert data["birthDate"] == "1990-04-12"
    assert data["user"]["email"] == "mary@example.com"
    assert data["user"]["role"] == "PATIENT"
    assert data["user"]["firstName"] == "Mary"

    user = db_session.query(User).filter(User.email == "mary@example.com").one()
    assert user.password_hash.startswith("pbkdf2_sha256$")


def test_create_patient_validation(client, admin):
    payload = {"email": "nope", "password": "123", "firstName": "M", "lastName": "Major", "gender": "ROBOT"}
    r = client.post(f"{API}/patients", json=payload, headers=auth(admin))
    assert r.status_code == 400
    fields = [d["field"] for d in r.json()["details"]]
    assert fields == ["email", "password", "firstName", "gender"]


def test_birth_date_must_be_a_plain_day(client, admin):
    payload = {
        "email": "m@example.com", "password": "secret1", "firstName": "Mary", "lastName": "Major",
        "birthDate": "1990-01-01T10:00:00",
    }
    r = client.post(f"{API}/patients", json=payload, headers=auth(admin))
    assert r.status_code == 400
    assert [(d["field"], d["code"]) for d in r.json()["details"]] == [("birthDate", "custom")]


def test_schema_coercion_failure_names_the_wire_field():
    with pytest.raises(InvalidPayload) as exc_info:
        coerce_payload(PatientUpdate, {"birthDate": "1990-01-01T10:00:00"})
    assert [e.field for e in exc_info.value.errors] == ["birthDate"]


def test_only_admin_creates_patients(client, doctor_user):
    payload = {"email": "m@example.com", "password": "secret1", "firstName": "Mary", "lastName": "Major"}
    r = client.post(f"{API}/patients", json=payload, headers=auth(doctor_user))
    assert r.status_code == 403


def test_doctor_updates_patient_profile_and_name(client, db_session, doctor_user):
    p = create_patient(db_session, "upd@example.com")
    r = client.put(
        f"{API}/patients/{p.id}",
        json={"firstName": "Renamed", "address": "12 rue de la Paix"},
        headers=auth(doctor_user),
    )
    assert r.status_code == 200, r.text
    data = r.json()["data"]
    assert data["address"] == "12 rue de la Paix"
    assert data["user"]["firstName"] == "Renamed"
    assert r.json()["message"] == "updated"


def test_update_missing_patient_is_404(client, admin):
    r = client.put(f"{API}/patients/4242", json={"phone": "1"}, headers=auth(admin))
    assert r.status_code == 404


def test_delete_patient_removes_user(client, db_session, admin):
    p = create_patient(db_session, "bye@example.com")
    patient_id, user_id = p.id, p.user_id

    r = client.delete(f"{API}/patients/{patient_id}", headers=auth(admin))
    assert r.status_code == 200
    assert r.json() == {"success": True, "message": "deleted"}

    db_session.expire_all()
    assert db_session.query(User).filter(User.id == user_id).one_or_none() is None

    again = client.delete(f"{API}/patients/{patient_id}", headers=auth(admin))
    assert again.status_code == 404


def test_patient_related_lists(client, db_session, doctor_user):
    p = create_patient(db_session, "rel@example.com")
    other = create_patient(db_session, "other@example.com")
    d = create_doctor(db_session, "doc@example.com")
    create_appointment(db_session, p, d)
    create_appointment(db_session, other, d)
    headers = auth(doctor_user)

    r = client.get(f"{API}/patients/{p.id}/appointments", headers=headers)
    assert r.status_code == 200
    assert [a["patientId"] for a in r.json()["data"]] == [p.id]

    assert client.get(f"{API}/patients/{p.id}/prescriptions", headers=headers).json() == {"success": True, "data": []}
    assert client.get(f"{API}/patients/{p.id}/medical-records", headers=headers).json()["data"] == []
    assert client.get(f"{API}/patients/abc/appointments", headers=headers).status_code == 400


def test_patient_diagnoses(client, db_session, doctor_user):
    p = create_patient(db_session, "sick@example.com")
    flu = create_disease(db_session, "Influenza", is_viral=True)
    headers = auth(doctor_user)

    r = client.post(
        f"{API}/patient-diseases",
        json={"patientId": p.id, "diseaseId": flu.id, "severity": "MODERATE"},
        headers=headers,
    )
    assert r.status_code == 201, r.text
    diagnosis = r.json()["data"]
    assert diagnosis["status"] == "ACTIVE"
    assert diagnosis["severity"] == "MODERATE"

    listed = client.get(f"{API}/patients/{p.id}/diseases", headers=headers)
    assert [d["diseaseId"] for d in listed.json()["data"]] == [flu.id]

    upd = client.put(f"{API}/patient-diseases/{diagnosis['id']}", json={"status": "CURED"}, headers=headers)
    assert upd.status_code == 200
    assert upd.json()["data"]["status"] == "CURED"

    bad = client.put(f"{API}/patient-diseases/{diagnosis['id']}", json={"status": "GONE"}, headers=headers)
    assert bad.status_code == 400
