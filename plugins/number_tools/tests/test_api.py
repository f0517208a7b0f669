from app import create_app


def _client():
    app = create_app("TestingConfig")
    return app.test_client()


def test_compare_endpoint():
    client = _client()
    response = client.post("/api/number_tools/compare", json={"first": 200, "second": 205})
    assert response.status_code == 200
    data = response.get_json()["data"]
    assert data["diff"] == 5
    assert data["percent_display"] == "2.50%"


def test_adjust_endpoint():
    client = _client()
    response = client.post("/api/number_tools/adjust", json={"base": 200, "percent": -10})
    assert response.status_code == 200
    assert response.get_json()["data"]["result_display"] == "180.00"


def test_rejects_non_finite_literals():
    client = _client()
    response = client.post(
        "/api/number_tools/compare",
        data='{"first": NaN, "second": 1}',
        content_type="application/json",
    )
    assert response.status_code == 400
    assert response.get_json()["error"]["code"] == "number.invalid_request"


def test_rejects_missing_operand():
    client = _client()
    response = client.post("/api/number_tools/adjust", json={"base": 1})
    assert response.status_code == 400
    assert response.get_json()["error"]["code"] == "number.invalid_request"


def test_overflowing_result():
    client = _client()
    response = client.post("/api/number_tools/adjust", json={"base": 1e308, "percent": 100})
    assert response.status_code == 400
    assert response.get_json()["error"]["code"] == "number.invalid_input"
