"""
Tests de los endpoints HTTP con cliente de completions falso y SQLite en memoria.
"""

import pytest
from fastapi.testclient import TestClient

from api.main import create_app

CATEGORY_ENDPOINTS = [
    ("/api/validate-idea", "ideaInput", "Idea input is required."),
    ("/api/validate-market-size", "marketSizeInput", "Market size input is required."),
    ("/api/validate-problem-solution", "problemSolutionInput", "Problem & solution input is required."),
    ("/api/validate-business-model", "businessModelInput", "Business model input is required."),
]

OVERALL_PAYLOAD = {
    "ideaInput": "Solar-powered vending machines",
    "marketSizeInput": "Campuses and parks in LATAM",
    "problemSolutionInput": "No cold drinks off-grid; solar fridges solve it",
    "businessModelInput": "Per-unit sales plus service contracts",
}

ANALYSIS_PAYLOAD = {
    "idea": "Test idea",
    "modelName": "gpt-3.5-turbo",
    "maxToken": "100",
    "testerName": "Alice",
}


@pytest.mark.parametrize("path,field,_", CATEGORY_ENDPOINTS)
def test_category_endpoint_returns_validation(client, fake_client, path, field, _):
    response = client.post(path, json={field: "Any non-empty text"})

    assert response.status_code == 200
    assert response.json() == {"validation": fake_client.reply}
    assert len(fake_client.calls) == 1


@pytest.mark.parametrize("path,field,message", CATEGORY_ENDPOINTS)
def test_category_endpoint_missing_field_is_400(client, fake_client, path, field, message):
    response = client.post(path, json={})

    assert response.status_code == 400
    assert response.json() == {"error": message}
    assert fake_client.calls == []


@pytest.mark.parametrize("path,field,_", CATEGORY_ENDPOINTS)
def test_category_endpoint_upstream_failure_is_500(failing_api, path, field, _):
    response = failing_api.post(path, json={field: "text"})

    assert response.status_code == 500
    assert "error" in response.json()


def test_overall_report_returns_overall_report(client, fake_client):
    response = client.post("/api/overall-validation-report", json=OVERALL_PAYLOAD)

    assert response.status_code == 200
    assert response.json() == {"overallReport": fake_client.reply}


@pytest.mark.parametrize("missing", sorted(OVERALL_PAYLOAD))
def test_overall_report_missing_any_field_is_400(client, missing):
    payload = {k: v for k, v in OVERALL_PAYLOAD.items() if k != missing}

    response = client.post("/api/overall-validation-report", json=payload)

    assert response.status_code == 400
    assert "error" in response.json()


def test_overall_report_upstream_failure_is_500(failing_api):
    response = failing_api.post("/api/overall-validation-report", json=OVERALL_PAYLOAD)

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to generate overall validation report."}


def test_analysis_persists_one_record_with_integer_max_token(client, store):
    response = client.post("/api/analysis-validation-report", json=ANALYSIS_PAYLOAD)

    assert response.status_code == 200
    reports = store.list_all()
    assert len(reports) == 1
    assert reports[0]["maxToken"] == 100
    assert reports[0]["testerName"] == "Alice"
    assert response.json() == {"overallReport": reports[0]["overallReport"]}


def test_analysis_accepts_numeric_max_token(client, fake_client):
    response = client.post("/api/analysis-validation-report", json={**ANALYSIS_PAYLOAD, "maxToken": 250})

    assert response.status_code == 200
    assert fake_client.calls[0]["max_tokens"] == 250


@pytest.mark.parametrize("missing", sorted(ANALYSIS_PAYLOAD))
def test_analysis_missing_field_is_400(client, store, missing):
    payload = {k: v for k, v in ANALYSIS_PAYLOAD.items() if k != missing}

    response = client.post("/api/analysis-validation-report", json=payload)

    assert response.status_code == 400
    assert "error" in response.json()
    assert store.list_all() == []


def test_analysis_non_numeric_max_token_is_400(client, store):
    response = client.post("/api/analysis-validation-report", json={**ANALYSIS_PAYLOAD, "maxToken": "many"})

    assert response.status_code == 400
    assert response.json() == {"error": "maxToken must be a positive integer."}
    assert store.list_all() == []


def test_analysis_upstream_failure_persists_nothing(failing_api, store):
    response = failing_api.post("/api/analysis-validation-report", json=ANALYSIS_PAYLOAD)

    assert response.status_code == 500
    assert "error" in response.json()
    assert store.list_all() == []


def test_list_reports_empty_is_404(client):
    response = client.get("/api/validation-reports")

    assert response.status_code == 404
    assert response.json() == {"message": "No validation reports found."}


def test_list_reports_returns_every_insert(client):
    for tester in ("Alice", "Bob", "Alice"):
        client.post("/api/analysis-validation-report", json={**ANALYSIS_PAYLOAD, "testerName": tester})

    response = client.get("/api/validation-reports")

    assert response.status_code == 200
    body = response.json()
    assert len(body) == 3
    assert {"id", "idea", "modelName", "maxToken", "overallReport", "testerName", "createdAt"} <= set(body[0])


def test_list_reports_twice_is_identical(client):
    client.post("/api/analysis-validation-report", json=ANALYSIS_PAYLOAD)

    first = client.get("/api/validation-reports")
    second = client.get("/api/validation-reports")

    assert first.status_code == 200
    assert first.json() == second.json()


def test_non_object_body_is_400(client):
    response = client.post("/api/validate-idea", json=["not", "an", "object"])

    assert response.status_code == 400
    assert "error" in response.json()


def test_cors_allows_any_origin(client):
    response = client.options(
        "/api/validate-idea",
        headers={"Origin": "http://example.com", "Access-Control-Request-Method": "POST"},
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"


def test_health(client):
    assert client.get("/health").json()["status"] == "ok"


class ExplodingClient:
    """Cliente que falla con un error no previsto por el cliente de completions."""

    def complete(self, messages, model, max_tokens):
        raise RuntimeError("unexpected failure")


@pytest.fixture
def exploding_api(settings, store):
    app = create_app(settings=settings, completion_client=ExplodingClient(), report_store=store)
    with TestClient(app) as c:
        yield c


@pytest.mark.parametrize("path,field,_", CATEGORY_ENDPOINTS)
def test_category_endpoint_unexpected_error_is_json_500(exploding_api, path, field, _):
    response = exploding_api.post(path, json={field: "x"})

    assert response.status_code == 500
    assert response.headers["content-type"].startswith("application/json")
    assert "error" in response.json()


def test_overall_report_unexpected_error_is_json_500(exploding_api):
    response = exploding_api.post("/api/overall-validation-report", json=OVERALL_PAYLOAD)

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to generate overall validation report."}


def test_analysis_unexpected_error_is_json_500_and_persists_nothing(exploding_api, store):
    response = exploding_api.post("/api/analysis-validation-report", json=ANALYSIS_PAYLOAD)

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to generate overall validation report."}
    assert store.list_all() == []


@pytest.mark.parametrize("max_token", ["99999999999999999999", 2**31, "1_000", "١٠٠"])
def test_analysis_out_of_range_max_token_is_400_without_upstream_call(client, fake_client, store, max_token):
    response = client.post("/api/analysis-validation-report", json={**ANALYSIS_PAYLOAD, "maxToken": max_token})

    assert response.status_code == 400
    assert response.json() == {"error": "maxToken must be a positive integer."}
    assert fake_client.calls == []
    assert store.list_all() == []
