"""Contract tests for the response envelope.

Every endpoint (success or failure) must answer with exactly one of
``data``/``error``, agreeing with ``success``, plus a UTC millisecond
timestamp. Error envelopes carry a string code and message.
"""

import re

import pytest
from fastapi.testclient import TestClient

TIMESTAMP_RE = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$")

# (method, path, json body, expected status)
CALLS = [
    ("GET", "/api/accommodation", None, 200),
    ("GET", "/api/accommodation?country=Thailand&minPrice=50", None, 200),
    ("GET", "/api/accommodation?minPrice=abc", None, 200),
    ("GET", "/api/packages", None, 200),
    ("GET", "/api/packages/pkg-1", None, 200),
    ("GET", "/api/packages/does-not-exist", None, 404),
    ("GET", "/api/excursions?category=all", None, 200),
    ("POST", "/api/payment/verify", {"transactionId": "abc"}, 200),
    ("POST", "/api/payment/verify", {}, 400),
    ("POST", "/api/payment/verify", {"transactionId": 5}, 422),
    ("POST", "/api/payment/process", {"amount": 99.5}, 200),
    ("POST", "/api/payment/process", {"amount": 0}, 400),
    ("GET", "/api/sgr/availability", None, 200),
    ("GET", "/api/transport/search?origin=Nairobi&destination=Zanzibar", None, 200),
    ("GET", "/api/transport/search?mode=Ferry", None, 200),
    ("GET", "/api/nowhere", None, 404),
    ("DELETE", "/api/packages", None, 405),
]


@pytest.mark.parametrize("method, path, body, status", CALLS)
def test_envelope_shape(
    client: TestClient, method: str, path: str, body: dict | None, status: int
) -> None:
    response = client.request(method, path, json=body)
    assert response.status_code == status

    envelope = response.json()
    assert set(envelope) in ({"success", "data", "timestamp"}, {"success", "error", "timestamp"})
    assert envelope["success"] is ("data" in envelope)
    assert envelope["success"] is (status < 400)
    assert TIMESTAMP_RE.match(envelope["timestamp"])

    if not envelope["success"]:
        assert set(envelope["error"]) == {"code", "message"}
        assert isinstance(envelope["error"]["code"], str)
        assert envelope["error"]["message"]


@pytest.mark.parametrize(
    "path, expected_code",
    [
        ("/api/packages/does-not-exist", "NOT_FOUND"),
        ("/api/nowhere", "NOT_FOUND"),
    ],
)
def test_not_found_codes(client: TestClient, path: str, expected_code: str) -> None:
    assert client.get(path).json()["error"]["code"] == expected_code
