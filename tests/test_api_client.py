"""
tests/test_api_client.py

Dashboard HTTP helpers, served by the real FastAPI app through TestClient.
"""

import pytest
import requests
from fastapi.testclient import TestClient

import api_client
from main import app


@pytest.fixture
def routed(monkeypatch):
    """Send the helpers' requests to the in-process app."""
    client = TestClient(app)

    def _path(url):
        assert url.startswith(api_client.API_BASE_URL)
        return url[len(api_client.API_BASE_URL):]

    monkeypatch.setattr(api_client.requests, "get", lambda url, **kw: client.get(_path(url), **kw))
    monkeypatch.setattr(api_client.requests, "post", lambda url, **kw: client.post(_path(url), **kw))
    return client


@pytest.fixture
def offline(monkeypatch):
    def _fail(url, **kw):
        raise requests.ConnectionError("connection refused")

    monkeypatch.setattr(api_client.requests, "get", _fail)
    monkeypatch.setattr(api_client.requests, "post", _fail)


class TestOnline:

    def test_connection(self, routed):
        assert api_client.check_api_connection()

    def test_summary(self, routed):
        snapshot = {
            "bucket": {
                "id": "b1", "name": "Flat",
                "participants": {"A": {"uid": "A", "email": "a@example.com"}},
            },
            "expenses": [{"id": "e1", "amount": 10, "paid_by": "X"}],
        }
        summary, success = api_client.fetch_summary(snapshot)

        assert success
        assert summary["balances"] == {"A": -10.0, "X": 10.0}
        assert summary["settlements"] == [{"from": "A", "to": "X", "amount": 10.0}]

    def test_validate_percentages(self, routed):
        check, success = api_client.validate_percentages({"A": 50, "B": 40})
        assert success
        assert check == {"total": 90.0, "valid": False}

    def test_validate_percentages_within_tolerance(self, routed):
        check, success = api_client.validate_percentages({"A": 33.33, "B": 33.33, "C": 33.33})
        assert success
        assert check["valid"]

    def test_preview_split_error_detail(self, routed):
        result, success = api_client.preview_split(10, {"type": "even"}, [])
        assert not success
        assert "zero participants" in result["detail"]

    def test_default_percentages(self, routed):
        assert api_client.fetch_default_percentages(["A", "B", "C"]) == {"A": 34, "B": 33, "C": 33}


class TestOffline:

    def test_connection(self, offline):
        assert not api_client.check_api_connection()

    def test_summary(self, offline):
        result, success = api_client.fetch_summary({})
        assert not success
        assert "connection refused" in result["detail"]

    def test_validate_percentages(self, offline):
        result, success = api_client.validate_percentages({"A": 100})
        assert not success

    def test_default_percentages(self, offline):
        assert api_client.fetch_default_percentages(["A"]) == {}
