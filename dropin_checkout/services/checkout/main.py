"""HTTPS surface for client token issuance and checkout.

`create_app` wires an already-built settings object and gateway into a
FastAPI app; `run` is the process entrypoint that builds both from the
environment and serves the app over TLS.
"""

from time import perf_counter
from uuid import uuid4

import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse

from dropin_checkout.common.config import Settings
from dropin_checkout.common.errors import GatewayError, InvalidCheckoutRequest
from dropin_checkout.common.logging import configure_logging, correlation_id_ctx, logger
from dropin_checkout.common.metrics import (
    http_request_duration_seconds,
    http_requests_total,
    metrics_response,
)
from dropin_checkout.common.startup import log_startup_config
from dropin_checkout.common.tracing import instrument_app, setup_tracing
from dropin_checkout.services.checkout.gateway import BraintreeGateway
from dropin_checkout.services.checkout.schemas import CheckoutRequest, CheckoutResult
from dropin_checkout.services.checkout.service import CheckoutService, PaymentGateway


CORRELATION_HEADER = "X-Correlation-ID"


def get_checkout_service(request: Request) -> CheckoutService:
    return request.app.state.checkout_service


def create_app(settings: Settings, gateway: PaymentGateway) -> FastAPI:
    """Build the app around an injected gateway."""

    app = FastAPI(title="Drop-in Checkout")
    app.state.checkout_service = CheckoutService(gateway, service_name=settings.service_name)
    if settings.tracing_enabled:
        instrument_app(app)

    @app.middleware("http")
    async def request_context_middleware(request: Request, call_next):
        """Tag the request with a correlation id and record count/latency."""

        correlation_id = request.headers.get(CORRELATION_HEADER) or str(uuid4())
        correlation_id_ctx.set(correlation_id)
        start = perf_counter()
        route = request.url.path
        method = request.method
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            route_obj = request.scope.get("route")
            if route_obj is not None and getattr(route_obj, "path", None):
                route = route_obj.path
            response.headers[CORRELATION_HEADER] = correlation_id
            return response
        finally:
            elapsed = max(0.0, perf_counter() - start)
            http_request_duration_seconds.labels(
                service=settings.service_name,
                route=route,
                method=method,
            ).observe(elapsed)
            http_requests_total.labels(
                service=settings.service_name,
                route=route,
                method=method,
                status_code=str(status_code),
            ).inc()

    @app.exception_handler(RequestValidationError)
    async def invalid_body_handler(_: Request, exc: RequestValidationError):
        logger.warning("rejected request body errors=%s", exc.errors())
        result = CheckoutResult(success=False, message="Invalid request body")
        return JSONResponse(status_code=400, content=result.body())

    @app.get("/client_token", response_class=PlainTextResponse)
    async def client_token(service: CheckoutService = Depends(get_checkout_service)):
        """Issue a client token for the drop-in payment form."""

        try:
            token = await service.issue_client_token()
        except GatewayError:
            logger.exception("failed to generate client token")
            return PlainTextResponse("Could not generate client token", status_code=500)
        return PlainTextResponse(token)

    @app.post("/checkout")
    async def checkout(
        req: CheckoutRequest | None = None,
        service: CheckoutService = Depends(get_checkout_service),
    ):
        """Charge the posted nonce for the posted amount and settle immediately.

        Declines are reported with HTTP 200 and `success: false`.
        """

        try:
            result = await service.process_checkout(req or CheckoutRequest())
        except InvalidCheckoutRequest as exc:
            logger.warning("checkout rejected: %s", exc)
            return JSONResponse(
                status_code=400,
                content=CheckoutResult(success=False, message=str(exc)).body(),
            )
        except GatewayError:
            logger.exception("error during checkout")
            return JSONResponse(
                status_code=500,
                content=CheckoutResult(success=False, message="Server error").body(),
            )
        return JSONResponse(content=result.body())

    @app.get("/metrics")
    def metrics():
        """Prometheus scrape endpoint."""

        return metrics_response()

    @app.get("/health")
    def health():
        """Liveness probe endpoint."""

        return {"ok": True}

    return app


def run() -> None:
    """Load settings, build the gateway and serve over HTTPS."""

    settings = Settings()
    configure_logging(settings.service_name, settings.log_level)
    if settings.tracing_enabled:
        setup_tracing(settings.service_name, settings.otel_exporter_otlp_endpoint)
    log_startup_config(settings)

    missing = settings.missing_tls_files()
    if missing:
        logger.error("tls files not found: %s", ", ".join(str(path) for path in missing))
        raise SystemExit(1)

    app = create_app(settings, BraintreeGateway.from_settings(settings))
    ssl_options = {}
    if settings.tls_enabled:
        ssl_options = {
            "ssl_keyfile": str(settings.tls_keyfile),
            "ssl_certfile": str(settings.tls_certfile),
        }
    scheme = "https" if settings.tls_enabled else "http"
    logger.info("server running at %s://%s:%s", scheme, settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None, **ssl_options)


if __name__ == "__main__":
    run()
