"""
Tests for the ADF validation API.
"""

from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.adapters.rules_adapter import RulesAdapter
from src.api.deps import get_rules_adapter
from src.api.routes.adf import router
from src.rules.models import ADFRules, ProjectRules, Rules


def _rules(max_depth: int = 64, max_json_bytes: int = 400_000) -> Rules:
    return Rules(
        project=ProjectRules(slug="test", rules_version="1"),
        adf=ADFRules(max_depth=max_depth, max_json_bytes=max_json_bytes),
    )


def _client(rules: Rules) -> TestClient:
    app = FastAPI()
    app.include_router(router, prefix="/api/adf")
    app.dependency_overrides[get_rules_adapter] = lambda: RulesAdapter(rules)
    return TestClient(app)


@pytest.fixture
def client() -> TestClient:
    """Test client with default limits."""
    return _client(_rules())


class TestValidateEndpoint:
    """POST /api/adf/validate."""

    def test_valid_document(self, client: TestClient, sample_doc: dict) -> None:
        response = client.post("/api/adf/validate", json={"document": sample_doc})

        assert response.status_code == 200
        assert response.json() == {"valid": True, "error": None}

    def test_invalid_document_is_not_an_http_error(self, client: TestClient) -> None:
        """An invalid document is reported in the body."""
        doc = {"type": "doc", "version": 1, "content": [{"type": "table"}]}

        response = client.post("/api/adf/validate", json={"document": doc})

        assert response.status_code == 200
        data = response.json()
        assert data["valid"] is False
        assert data["error"]["path"] == "content[0]"
        assert data["error"]["message"] == "Invalid block node type 'table'"
        assert "paragraph" in data["error"]["details"]

    def test_null_document(self, client: TestClient) -> None:
        response = client.post("/api/adf/validate", json={"document": None})

        data = response.json()
        assert data["valid"] is False
        assert data["error"]["message"] == "Root must be an object"
        assert data["error"]["path"] == "root"

    def test_missing_document_field(self, client: TestClient) -> None:
        response = client.post("/api/adf/validate", json={})

        assert response.status_code == 422

    def test_depth_limit_applied(self, sample_doc: dict) -> None:
        client = _client(_rules(max_depth=2))

        response = client.post("/api/adf/validate", json={"document": sample_doc})

        data = response.json()
        assert data["valid"] is False
        assert "maximum depth of 2" in data["error"]["message"]


class TestLimitsEndpoint:
    """POST /api/adf/limits."""

    def test_within_limits(self, client: TestClient, sample_doc: dict) -> None:
        response = client.post("/api/adf/limits", json={"document": sample_doc})

        assert response.status_code == 200
        data = response.json()
        assert data["within_limits"] is True
        assert data["depth"] == 4
        assert data["error"] is None

    def test_size_limit(self, sample_doc: dict) -> None:
        client = _client(_rules(max_json_bytes=50))

        response = client.post("/api/adf/limits", json={"document": sample_doc})

        data = response.json()
        assert data["within_limits"] is False
        assert data["error"]["path"] == "root"
        assert data["error"]["message"].endswith("exceeds limit 50B")

    def test_limits_do_not_check_grammar(self, client: TestClient) -> None:
        """A structurally invalid but small document passes the caps."""
        response = client.post("/api/adf/limits", json={"document": {"type": "nope"}})

        assert response.json()["within_limits"] is True
