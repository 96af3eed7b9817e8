from tests.helpers import API, auth, create_appointment, create_disease, create_doctor, create_patient, create_symptom


def test_stats_are_staff_only(client, patient_user):
    assert client.get(f"{API}/stats/dashboard", headers=auth(patient_user)).status_code == 403


def test_dashboard_counts(client, db_session, admin):
    p = create_patient(db_session, "p@example.com", gender="FEMALE")
    d = create_doctor(db_session, "d@example.com")
    create_appointment(db_session, p, d, in_days=3)
    create_appointment(db_session, p, d, in_days=-3)
    create_appointment(db_session, p, d, in_days=5, status="CANCELLED")

    r = client.get(f"{API}/stats/dashboard", headers=auth(admin))
    assert r.status_code == 200
    assert r.json() == {
        "success": True,
        "data": {
            "users": 3,
            "patients": 1,
            "doctors": 1,
            "appointments": 3,
            "upcomingAppointments": 1,
            "recentPrescriptions": 0,
        },
    }


def test_appointment_and_patient_breakdowns(client, db_session, doctor_user):
    p1 = create_patient(db_session, "a@example.com", gender="MALE")
    p2 = create_patient(db_session, "b@example.com")
    d = create_doctor(db_session, "doc@example.com")
    create_appointment(db_session, p1, d)
    create_appointment(db_session, p2, d, status="COMPLETED")
    create_appointment(db_session, p2, d, status="COMPLETED")
    headers = auth(doctor_user)

    appts = client.get(f"{API}/stats/appointments", headers=headers).json()["data"]
    assert appts == {"total": 3, "byStatus": {"SCHEDULED": 1, "COMPLETED": 2}}

    patients = client.get(f"{API}/stats/patients", headers=headers).json()["data"]
    assert patients == {"total": 2, "byGender": {"MALE": 1, "UNKNOWN": 1}}


def test_disease_stats(client, db_session, admin):
    flu = create_disease(db_session, "Influenza", is_viral=True)
    create_disease(db_session, "Asthma", is_chronic=True)
    flu.symptoms.append(create_symptom(db_session, "Fever"))
    db_session.commit()

    data = client.get(f"{API}/stats/diseases", headers=auth(admin)).json()["data"]
    assert data == {"total": 2, "chronic": 1, "withSymptoms": 1}
