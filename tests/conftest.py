"""Shared fixtures: settings built from literals and an in-memory gateway."""

import pytest
from fastapi.testclient import TestClient

from dropin_checkout.common.config import Settings
from dropin_checkout.services.checkout.gateway import SaleOutcome
from dropin_checkout.services.checkout.main import create_app


class FakeGateway:
    """Records calls and returns canned results instead of talking to Braintree."""

    def __init__(self) -> None:
        self.token = "client-token-abc"
        self.outcome = SaleOutcome(success=True, transaction_id="txn_123")
        self.error: Exception | None = None
        self.sales: list[tuple[str | None, str]] = []
        self.token_calls = 0

    async def generate_client_token(self) -> str:
        self.token_calls += 1
        if self.error is not None:
            raise self.error
        return self.token

    async def sale(self, payment_method_nonce, amount):
        self.sales.append((payment_method_nonce, amount))
        if self.error is not None:
            raise self.error
        return self.outcome


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        braintree_merchant_id="merchant",
        braintree_public_key="public",
        braintree_private_key="private",
        tls_enabled=False,
    )


@pytest.fixture
def gateway() -> FakeGateway:
    return FakeGateway()


@pytest.fixture
def client(settings, gateway):
    with TestClient(create_app(settings, gateway)) as test_client:
        yield test_client
