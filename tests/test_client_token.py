"""HTTP-level tests for GET /client_token and the metrics endpoint."""

from dropin_checkout.common.errors import GatewayError


def test_client_token_is_returned_verbatim(client, gateway):
    gateway.token = "eyJ2ZXJzaW9uIjoyfQ=="

    resp = client.get("/client_token")

    assert resp.status_code == 200
    assert resp.text == "eyJ2ZXJzaW9uIjoyfQ=="
    assert resp.headers["content-type"].startswith("text/plain")
    assert gateway.token_calls == 1


def test_each_request_gets_a_fresh_token(client, gateway):
    client.get("/client_token")
    client.get("/client_token")

    assert gateway.token_calls == 2


def test_token_failure_returns_500(client, gateway):
    gateway.error = GatewayError("client_token", RuntimeError("authentication error"))

    resp = client.get("/client_token")

    assert resp.status_code == 500
    assert resp.text == "Could not generate client token"


def test_metrics_count_token_results(client, gateway):
    client.get("/client_token")

    resp = client.get("/metrics")

    assert resp.status_code == 200
    assert "client_token_requests_total" in resp.text
