"""Smoke run against a live checkout server.

Fetches a client token, then posts a checkout using one of the gateway's
sandbox test nonces and prints what came back.
"""

import argparse
import json
import time
from uuid import uuid4

import httpx


def fetch_client_token(client: httpx.Client, base_url: str) -> tuple[int, str]:
    resp = client.get(f"{base_url}/client_token")
    return resp.status_code, resp.text


def post_checkout(client: httpx.Client, base_url: str, nonce: str, amount: str | None):
    """Post one checkout and return (status_code, latency_ms, body)."""

    payload = {"paymentMethodNonce": nonce}
    if amount is not None:
        payload["amount"] = amount
    started = time.perf_counter()
    resp = client.post(
        f"{base_url}/checkout",
        json=payload,
        headers={"x-correlation-id": str(uuid4())},
    )
    latency = (time.perf_counter() - started) * 1000
    try:
        body = resp.json()
    except ValueError:
        body = {"raw": resp.text}
    return resp.status_code, latency, body


def main():
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--base-url", default="https://localhost:3000")
    parser.add_argument("--nonce", default="fake-valid-nonce")
    parser.add_argument("--amount", default="10.00")
    parser.add_argument("--insecure", action="store_true", help="skip TLS verification (self-signed certs)")
    args = parser.parse_args()

    with httpx.Client(timeout=30.0, verify=not args.insecure) as client:
        status, token = fetch_client_token(client, args.base_url)
        print(f"client_token status={status} length={len(token)}")
        status, latency, body = post_checkout(client, args.base_url, args.nonce, args.amount)
        print(f"checkout status={status} latency_ms={latency:.1f} body={json.dumps(body)}")


if __name__ == "__main__":
    main()
