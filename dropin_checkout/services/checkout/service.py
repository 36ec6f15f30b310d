"""Token issuance and checkout flows on top of the gateway adapter."""

from typing import Protocol

from dropin_checkout.common.errors import GatewayError, InvalidCheckoutRequest
from dropin_checkout.common.logging import logger
from dropin_checkout.common.metrics import checkout_requests_total, client_token_requests_total
from dropin_checkout.services.checkout.gateway import SaleOutcome
from dropin_checkout.services.checkout.schemas import CheckoutRequest, CheckoutResult


class PaymentGateway(Protocol):
    async def generate_client_token(self) -> str: ...

    async def sale(self, payment_method_nonce: str | int | float | None, amount: str) -> SaleOutcome: ...


class CheckoutService:
    """Stateless request flows; holds only the injected gateway."""

    def __init__(self, gateway: PaymentGateway, service_name: str = "dropin-checkout") -> None:
        self.gateway = gateway
        self.service_name = service_name

    async def issue_client_token(self) -> str:
        """Return a fresh client token verbatim. Gateway errors propagate."""

        try:
            token = await self.gateway.generate_client_token()
        except GatewayError:
            client_token_requests_total.labels(service=self.service_name, result="error").inc()
            raise
        client_token_requests_total.labels(service=self.service_name, result="ok").inc()
        return token

    async def process_checkout(self, req: CheckoutRequest) -> CheckoutResult:
        """Run one sale and map the gateway outcome to a client result.

        Raises `InvalidCheckoutRequest` when no amount was sent and
        `GatewayError` when the gateway call itself fails. A declined sale is
        a normal unsuccessful result.
        """

        amount = req.amount_text()
        if amount is None:
            checkout_requests_total.labels(service=self.service_name, outcome="invalid").inc()
            raise InvalidCheckoutRequest("Missing amount")

        try:
            outcome = await self.gateway.sale(req.payment_method_nonce, amount)
        except GatewayError:
            checkout_requests_total.labels(service=self.service_name, outcome="error").inc()
            raise

        if outcome.success:
            checkout_requests_total.labels(service=self.service_name, outcome="success").inc()
            logger.info(
                "transaction submitted for settlement transaction_id=%s amount=%s",
                outcome.transaction_id,
                amount,
            )
            return CheckoutResult(success=True, transaction_id=outcome.transaction_id)

        checkout_requests_total.labels(service=self.service_name, outcome="declined").inc()
        logger.warning("transaction failed amount=%s message=%s", amount, outcome.message)
        return CheckoutResult(success=False, message=outcome.message)
