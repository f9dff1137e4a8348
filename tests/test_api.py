from fastapi.testclient import TestClient

from wilson_ci.api.main import app

client = TestClient(app)


def test_health() -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
    assert response.headers["X-Response-Time"].endswith("ms")


def test_interval_post() -> None:
    response = client.post("/interval", json={"successes": 73, "trials": 76, "confidence_level": 0.95})
    assert response.status_code == 200
    body = response.json()
    assert abs(body["proportion"] - 0.960526) < 1e-6
    assert body["lower_bound"] < body["proportion"] < body["upper_bound"]
    assert body["summary"].startswith("73/76 p=0.960526")


def test_interval_get_defaults_confidence() -> None:
    response = client.get("/interval", params={"successes": 10, "trials": 10})
    assert response.status_code == 200
    body = response.json()
    assert body["upper_bound"] == 1.0
    assert body["confidence_level"] == 0.95


def test_interval_rejects_successes_above_trials() -> None:
    response = client.post("/interval", json={"successes": 11, "trials": 10})
    assert response.status_code == 400
    assert "successes" in response.json()["detail"]


def test_interval_schema_validation() -> None:
    response = client.post("/interval", json={"successes": 5, "trials": 10, "confidence_level": 1.0})
    assert response.status_code == 422


def test_sweep() -> None:
    response = client.post("/sweep", json={"successes": 73, "trials": 76, "factors": [1, 2, 4]})
    assert response.status_code == 200
    rows = response.json()["rows"]
    assert [row["trials"] for row in rows] == [76, 152, 304]
    assert rows[0]["width"] > rows[1]["width"] > rows[2]["width"]


def test_sweep_rejects_zero_factor() -> None:
    response = client.post("/sweep", json={"successes": 1, "trials": 2, "factors": [1, 0]})
    assert response.status_code == 400


def test_interval_get_is_cacheable() -> None:
    response = client.get("/interval", params={"successes": 3, "trials": 4})
    assert response.headers["Cache-Control"] == "public, max-age=86400"
    assert response.headers["X-Response-Time"].endswith("ms")
    assert "Cache-Control" not in client.get("/interval", params={"successes": 5, "trials": 4}).headers


def test_interval_with_huge_counts() -> None:
    response = client.post("/interval", json={"successes": 10**200, "trials": 2 * 10**200})
    assert response.status_code == 200
    body = response.json()
    assert body["proportion"] == 0.5
    assert body["lower_bound"] <= 0.5 <= body["upper_bound"]


def test_interval_confidence_near_one() -> None:
    response = client.post("/interval", json={"successes": 1, "trials": 2, "confidence_level": 0.9999999999999999})
    assert response.status_code == 200
    body = response.json()
    assert body["lower_bound"] < body["upper_bound"]
