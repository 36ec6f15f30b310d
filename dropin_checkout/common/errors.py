"""Exception types shared by the gateway adapter and HTTP handlers."""


class CheckoutError(Exception):
    """Base class for checkout server errors."""


class GatewayError(CheckoutError):
    """The payment gateway could not be reached or raised while handling a call."""

    def __init__(self, operation: str, cause: BaseException | None = None) -> None:
        super().__init__(f"gateway {operation} failed: {cause!r}")
        self.operation = operation
        self.cause = cause


class InvalidCheckoutRequest(CheckoutError):
    """Client input that cannot be turned into a sale request."""
