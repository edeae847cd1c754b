"""
Tests for the main application endpoints.
"""

def test_root_endpoint(client):
    """
    Test the root endpoint returns a welcome message.
    """
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert "message" in data
    assert "version" in data


def test_health_check(client):
    """
    Test the health check endpoint returns a healthy status.
    """
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert "database" in data


def test_request_id_header(client):
    """
    Every response carries the request id set by the logging middleware.
    """
    response = client.get("/health")
    assert response.headers["X-Request-ID"]
    assert "X-Process-Time" in response.headers


def test_validation_error_shape(client, auth_headers):
    """
    Validation failures use the standard error body.
    """
    response = client.post("/api/v1/patients", json={}, headers=auth_headers)
    assert response.status_code == 422
    data = response.json()
    assert data["detail"] == "Validation error"
    assert {tuple(e["loc"])[-1] for e in data["errors"]} >= {
        "full_name", "date_of_birth", "gender", "contact_number"
    }
