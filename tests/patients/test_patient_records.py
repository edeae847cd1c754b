"""
Tests for the medical records, admission and billing attached to a patient.
"""
from decimal import Decimal
from datetime import date


RECORD = {
    "illness": "Pneumonia",
    "symptoms": "Fever, productive cough",
    "doctor_name": "Gregory House",
    "diagnosis": "Community-acquired pneumonia",
    "prescription": "Amoxicillin 500mg",
    "notes": "",
}


def test_add_medical_record(client, auth_headers, patient):
    response = client.post(
        f"/api/v1/patients/{patient['id']}/medical-records", json=RECORD, headers=auth_headers
    )
    assert response.status_code == 201
    data = response.json()
    assert data["patient_id"] == patient["id"]
    assert data["illness"] == "Pneumonia"
    assert data["notes"] is None


def test_medical_record_requires_symptoms(client, auth_headers, patient):
    payload = {k: v for k, v in RECORD.items() if k != "symptoms"}
    response = client.post(
        f"/api/v1/patients/{patient['id']}/medical-records", json=payload, headers=auth_headers
    )
    assert response.status_code == 422


def test_list_medical_records_newest_first(client, auth_headers, patient):
    url = f"/api/v1/patients/{patient['id']}/medical-records"
    first = client.post(url, json=RECORD, headers=auth_headers).json()
    second = client.post(url, json={**RECORD, "illness": "Bronchitis"}, headers=auth_headers).json()

    response = client.get(url, headers=auth_headers)
    assert response.status_code == 200
    assert [r["id"] for r in response.json()] == [second["id"], first["id"]]


def test_medical_records_unknown_patient(client, auth_headers):
    response = client.get("/api/v1/patients/9999/medical-records", headers=auth_headers)
    assert response.status_code == 404
    response = client.post("/api/v1/patients/9999/medical-records", json=RECORD, headers=auth_headers)
    assert response.status_code == 404


def test_admission_absent_is_null(client, auth_headers, patient):
    response = client.get(f"/api/v1/patients/{patient['id']}/admission", headers=auth_headers)
    assert response.status_code == 200
    assert response.json() is None


def test_add_admission(client, auth_headers, patient):
    url = f"/api/v1/patients/{patient['id']}/admission"
    response = client.post(
        url,
        json={"admission_date": "2025-03-01", "floor_number": "3", "room_number": "301B"},
        headers=auth_headers,
    )
    assert response.status_code == 201
    data = response.json()
    assert data["is_admitted"] is True
    assert data["floor_number"] == 3
    assert data["room_number"] == "301B"
    assert data["admission_date"] == "2025-03-01"
    assert data["discharge_date"] is None

    assert client.get(url, headers=auth_headers).json()["id"] == data["id"]


def test_admission_defaults(client, auth_headers, patient):
    response = client.post(
        f"/api/v1/patients/{patient['id']}/admission",
        json={"floor_number": "", "room_number": ""},
        headers=auth_headers,
    )
    assert response.status_code == 201
    data = response.json()
    assert data["admission_date"] == date.today().isoformat()
    assert data["floor_number"] is None
    assert data["room_number"] is None


def test_second_admission_rejected(client, auth_headers, patient):
    url = f"/api/v1/patients/{patient['id']}/admission"
    assert client.post(url, json={}, headers=auth_headers).status_code == 201
    response = client.post(url, json={}, headers=auth_headers)
    assert response.status_code == 409


def test_billing_absent_is_null(client, auth_headers, patient):
    response = client.get(f"/api/v1/patients/{patient['id']}/billing", headers=auth_headers)
    assert response.status_code == 200
    assert response.json() is None


def test_add_billing_computes_amount_due(client, auth_headers, patient):
    response = client.post(
        f"/api/v1/patients/{patient['id']}/billing",
        json={"total_amount": "1500.50", "amount_paid": "500.25", "payment_status": "partial"},
        headers=auth_headers,
    )
    assert response.status_code == 201
    data = response.json()
    assert Decimal(str(data["total_amount"])) == Decimal("1500.50")
    assert Decimal(str(data["amount_paid"])) == Decimal("500.25")
    assert Decimal(str(data["amount_due"])) == Decimal("1000.25")
    assert data["payment_status"] == "partial"


def test_billing_amounts_are_json_numbers(client, auth_headers, patient):
    url = f"/api/v1/patients/{patient['id']}/billing"
    client.post(url, json={"total_amount": 250, "amount_paid": 300}, headers=auth_headers)

    data = client.get(url, headers=auth_headers).json()

    assert data["total_amount"] == 250
    assert data["amount_paid"] == 300
    assert data["amount_due"] == -50
    assert isinstance(data["amount_due"], float)


def test_billing_rounds_amounts_to_cents(client, auth_headers, patient):
    response = client.post(
        f"/api/v1/patients/{patient['id']}/billing",
        json={"total_amount": "10.005", "amount_paid": "2.004"},
        headers=auth_headers,
    )

    assert response.status_code == 201
    data = response.json()
    assert data["total_amount"] == 10.01
    assert data["amount_paid"] == 2.0
    assert data["amount_due"] == 8.01


def test_billing_ignores_client_amount_due(client, auth_headers, patient):
    response = client.post(
        f"/api/v1/patients/{patient['id']}/billing",
        json={"total_amount": 200, "amount_due": 5},
        headers=auth_headers,
    )
    assert response.status_code == 201
    data = response.json()
    assert Decimal(str(data["amount_paid"])) == Decimal("0")
    assert Decimal(str(data["amount_due"])) == Decimal("200")
    assert data["payment_status"] == "pending"


def test_billing_rejects_negative_amounts(client, auth_headers, patient):
    response = client.post(
        f"/api/v1/patients/{patient['id']}/billing",
        json={"total_amount": -1},
        headers=auth_headers,
    )
    assert response.status_code == 422


def test_billing_rejects_unknown_status(client, auth_headers, patient):
    response = client.post(
        f"/api/v1/patients/{patient['id']}/billing",
        json={"total_amount": 10, "payment_status": "overdue"},
        headers=auth_headers,
    )
    assert response.status_code == 422


def test_second_billing_rejected(client, auth_headers, patient):
    url = f"/api/v1/patients/{patient['id']}/billing"
    assert client.post(url, json={"total_amount": 10}, headers=auth_headers).status_code == 201
    response = client.post(url, json={"total_amount": 20}, headers=auth_headers)
    assert response.status_code == 409
    assert Decimal(str(client.get(url, headers=auth_headers).json()["total_amount"])) == Decimal("10")
