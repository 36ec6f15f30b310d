"""Environment-driven settings for the checkout server.

Loaded once by the entrypoint and passed into the app factory (see
`.env.example` for the variables).
"""

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Typed view of runtime configuration from environment variables."""

    service_name: str = "dropin-checkout"
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = Field(default=3000, gt=0, lt=65536)
    braintree_environment: Literal["sandbox", "production"] = "sandbox"
    braintree_merchant_id: str = Field(min_length=1)
    braintree_public_key: str = Field(min_length=1)
    braintree_private_key: str = Field(min_length=1)
    tls_enabled: bool = True
    tls_keyfile: Path = Path("./certs/localhost-key.pem")
    tls_certfile: Path = Path("./certs/localhost.pem")
    tracing_enabled: bool = False
    otel_exporter_otlp_endpoint: str = "http://otel-collector:4318/v1/traces"
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    def missing_tls_files(self) -> list[Path]:
        """Return configured TLS files that do not exist on disk."""

        if not self.tls_enabled:
            return []
        return [path for path in (self.tls_keyfile, self.tls_certfile) if not path.is_file()]
