from fastapi.testclient import TestClient


def test_get_status(client: TestClient) -> None:
    response = client.get("/api/status")
    data = response.json()

    assert response.status_code == 200
    assert data["code"] == 200
    assert data["data"]["cache_backend"] == "memory"
    services = {item["service"]: item["status"] for item in data["data"]["services"]}
    assert services == {"cache": "ok", "fastapi": "ok"}
