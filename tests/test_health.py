"""Tests for the health endpoint."""


def test_health(client, upstream):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}
    assert upstream.requests == []
