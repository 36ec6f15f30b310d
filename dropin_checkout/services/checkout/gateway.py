"""Braintree adapter used by the checkout handlers.

The SDK is blocking, so each call runs in the worker thread pool and the
event loop keeps serving other requests while a gateway call is in flight.
"""

from dataclasses import dataclass

import braintree
from starlette.concurrency import run_in_threadpool

from dropin_checkout.common.config import Settings
from dropin_checkout.common.errors import GatewayError
from dropin_checkout.common.metrics import gateway_latency_seconds


ENVIRONMENTS = {
    "sandbox": braintree.Environment.Sandbox,
    "production": braintree.Environment.Production,
}


@dataclass(frozen=True)
class SaleOutcome:
    """Normalized result of a sale call."""

    success: bool
    transaction_id: str | None = None
    message: str | None = None


def build_braintree_client(settings: Settings) -> braintree.BraintreeGateway:
    """Create an SDK client from validated settings."""

    return braintree.BraintreeGateway(
        braintree.Configuration(
            environment=ENVIRONMENTS[settings.braintree_environment],
            merchant_id=settings.braintree_merchant_id,
            public_key=settings.braintree_public_key,
            private_key=settings.braintree_private_key,
        )
    )


class BraintreeGateway:
    """Token issuance and sales against a Braintree merchant account."""

    def __init__(self, client: braintree.BraintreeGateway) -> None:
        self.client = client

    @classmethod
    def from_settings(cls, settings: Settings) -> "BraintreeGateway":
        return cls(build_braintree_client(settings))

    async def generate_client_token(self) -> str:
        with gateway_latency_seconds.labels(operation="client_token").time():
            try:
                return await run_in_threadpool(self.client.client_token.generate)
            except Exception as exc:
                raise GatewayError("client_token", exc) from exc

    async def sale(self, payment_method_nonce: str | int | float | None, amount: str) -> SaleOutcome:
        """Submit a sale that settles immediately.

        Business failures (declines, validation errors) come back as an
        unsuccessful outcome; only transport or SDK errors raise.
        """

        request = {
            "amount": amount,
            "payment_method_nonce": payment_method_nonce,
            "options": {"submit_for_settlement": True},
        }
        with gateway_latency_seconds.labels(operation="sale").time():
            try:
                result = await run_in_threadpool(self.client.transaction.sale, request)
            except Exception as exc:
                raise GatewayError("sale", exc) from exc

        if result.is_success:
            return SaleOutcome(success=True, transaction_id=result.transaction.id)
        return SaleOutcome(success=False, message=result.message)
