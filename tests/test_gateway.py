"""Unit tests for the Braintree adapter, with the SDK client stubbed out."""

import asyncio
from types import SimpleNamespace

import braintree
import pytest

from dropin_checkout.common.errors import GatewayError
from dropin_checkout.services.checkout.gateway import BraintreeGateway, SaleOutcome, build_braintree_client


class StubTransactions:
    def __init__(self, result=None, error=None):
        self.result = result
        self.error = error
        self.requests = []

    def sale(self, request):
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.result


def make_client(transactions=None, token="token-xyz", token_error=None):
    def generate(params=None):
        if token_error is not None:
            raise token_error
        return token

    return SimpleNamespace(
        client_token=SimpleNamespace(generate=generate),
        transaction=transactions or StubTransactions(),
    )


def test_sale_submits_for_settlement():
    result = SimpleNamespace(is_success=True, transaction=SimpleNamespace(id="abc123"))
    transactions = StubTransactions(result=result)
    gateway = BraintreeGateway(make_client(transactions))

    outcome = asyncio.run(gateway.sale("fake-valid-nonce", "10.00"))

    assert outcome == SaleOutcome(success=True, transaction_id="abc123")
    assert transactions.requests == [
        {
            "amount": "10.00",
            "payment_method_nonce": "fake-valid-nonce",
            "options": {"submit_for_settlement": True},
        }
    ]


def test_unsuccessful_sale_carries_gateway_message():
    result = SimpleNamespace(is_success=False, message="Insufficient Funds", transaction=None)
    gateway = BraintreeGateway(make_client(StubTransactions(result=result)))

    outcome = asyncio.run(gateway.sale("nonce", "2001.00"))

    assert outcome.success is False
    assert outcome.message == "Insufficient Funds"
    assert outcome.transaction_id is None


def test_sdk_exception_becomes_gateway_error():
    cause = ConnectionError("connection reset by peer")
    gateway = BraintreeGateway(make_client(StubTransactions(error=cause)))

    with pytest.raises(GatewayError) as excinfo:
        asyncio.run(gateway.sale("nonce", "1.00"))

    assert excinfo.value.operation == "sale"
    assert excinfo.value.__cause__ is cause


def test_client_token_generation():
    gateway = BraintreeGateway(make_client(token="tok"))

    assert asyncio.run(gateway.generate_client_token()) == "tok"


def test_client_token_failure_becomes_gateway_error():
    gateway = BraintreeGateway(make_client(token_error=ConnectionError("down")))

    with pytest.raises(GatewayError) as excinfo:
        asyncio.run(gateway.generate_client_token())

    assert excinfo.value.operation == "client_token"


def test_build_client_uses_configured_environment(settings):
    client = build_braintree_client(settings)

    assert client.config.environment == braintree.Environment.Sandbox
    assert client.config.merchant_id == "merchant"
