from tests.helpers import API, auth, create_appointment, create_doctor, create_patient


def _pair(db):
    return create_patient(db, "pat@example.com"), create_doctor(db, "doc@example.com", specialty="Cardiology")


def test_create_appointment(client, db_session, patient_user):
    patient, doctor = _pair(db_session)
    payload = {
        "patientId": patient.id,
        "doctorId": doctor.id,
        "scheduledAt": "2030-05-01T09:30:00+00:00",
        "reason": "check-up",
    }
    r = client.post(f"{API}/appointments", json=payload, headers=auth(patient_user))
    assert r.status_code == 201, r.text
    data = r.json()["data"]
    assert data["status"] == "SCHEDULED"
    assert data["patientId"] == patient.id
    assert data["scheduledAt"].startswith("2030-05-01T09:30:00")


def test_create_appointment_validation(client, patient_user):
    payload = {"patientId": "abc", "doctorId": 0, "scheduledAt": "someday"}
    r = client.post(f"{API}/appointments", json=payload, headers=auth(patient_user))
    assert r.status_code == 400
    details = {d["field"]: d["code"] for d in r.json()["details"]}
    assert details == {"patientId": "type", "doctorId": "min", "scheduledAt": "type"}


def test_appointment_with_unknown_patient_is_repository_error(client, db_session, patient_user):
    doctor = create_doctor(db_session, "doc@example.com")
    payload = {"patientId": 999, "doctorId": doctor.id, "scheduledAt": "2030-05-01T09:30:00"}
    r = client.post(f"{API}/appointments", json=payload, headers=auth(patient_user))
    assert r.status_code == 500
    assert r.json()["success"] is False


def test_status_patch_requires_staff_and_valid_status(client, db_session, patient_user, doctor_user):
    patient, doctor = _pair(db_session)
    appt = create_appointment(db_session, patient, doctor)

    forbidden = client.patch(
        f"{API}/appointments/{appt.id}/status", json={"status": "CONFIRMED"}, headers=auth(patient_user)
    )
    assert forbidden.status_code == 403

    bad = client.patch(
        f"{API}/appointments/{appt.id}/status", json={"status": "LATE"}, headers=auth(doctor_user)
    )
    assert bad.status_code == 400
    assert bad.json()["details"][0]["message"] == "status must be one of: SCHEDULED, CONFIRMED, COMPLETED, CANCELLED"

    ok = client.patch(
        f"{API}/appointments/{appt.id}/status", json={"status": "CONFIRMED"}, headers=auth(doctor_user)
    )
    assert ok.status_code == 200
    assert ok.json()["data"]["status"] == "CONFIRMED"


def test_status_patch_ignores_status_in_query(client, db_session, doctor_user):
    patient, doctor = _pair(db_session)
    appt = create_appointment(db_session, patient, doctor)

    r = client.patch(
        f"{API}/appointments/{appt.id}/status?status=CONFIRMED", json={}, headers=auth(doctor_user)
    )
    assert r.status_code == 400
    assert r.json()["details"] == [{"field": "status", "code": "required", "message": "status is required"}]


def test_create_appointment_rejects_fractional_ids(client, db_session, patient_user):
    patient, doctor = _pair(db_session)
    payload = {"patientId": 1.5, "doctorId": doctor.id, "scheduledAt": "2030-05-01T09:30:00"}
    r = client.post(f"{API}/appointments", json=payload, headers=auth(patient_user))
    assert r.status_code == 400
    assert r.json()["error"] == "invalid validation data"
    assert r.json()["details"][0]["field"] == "patientId"
    assert r.json()["details"][0]["code"] == "custom"


def test_update_and_delete_appointment(client, db_session, patient_user):
    patient, doctor = _pair(db_session)
    appt = create_appointment(db_session, patient, doctor)
    headers = auth(patient_user)

    r = client.put(f"{API}/appointments/{appt.id}", json={"notes": "bring results"}, headers=headers)
    assert r.status_code == 200
    assert r.json()["data"]["notes"] == "bring results"

    d = client.delete(f"{API}/appointments/{appt.id}", headers=headers)
    assert d.json() == {"success": True, "message": "deleted"}
    assert client.get(f"{API}/appointments/{appt.id}", headers=headers).status_code == 404


def test_appointments_by_patient_and_doctor(client, db_session, doctor_user):
    patient, doctor = _pair(db_session)
    other_doctor = create_doctor(db_session, "doc2@example.com")
    create_appointment(db_session, patient, doctor, in_days=1)
    create_appointment(db_session, patient, other_doctor, in_days=2)
    headers = auth(doctor_user)

    by_patient = client.get(f"{API}/appointments/patient/{patient.id}", headers=headers).json()["data"]
    assert len(by_patient) == 2

    by_doctor = client.get(f"{API}/appointments/doctor/{other_doctor.id}", headers=headers).json()["data"]
    assert [a["doctorId"] for a in by_doctor] == [other_doctor.id]

    via_doctor_route = client.get(f"{API}/doctors/{doctor.id}/appointments", headers=headers).json()["data"]
    assert len(via_doctor_route) == 1


def test_doctor_specialties(client, db_session, doctor_user):
    create_doctor(db_session, "a@example.com", specialty="Neurology")
    create_doctor(db_session, "b@example.com", specialty="Cardiology")
    create_doctor(db_session, "c@example.com", specialty="Neurology")
    create_doctor(db_session, "d@example.com")

    r = client.get(f"{API}/doctors/specialties/list", headers=auth(doctor_user))
    assert r.status_code == 200
    assert r.json() == {"success": True, "data": ["Cardiology", "Neurology"]}
