"""API request/response schemas for checkout endpoints."""

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, StrictStr, field_validator


class CheckoutRequest(BaseModel):
    """Payload posted by the drop-in payment form."""

    model_config = ConfigDict(populate_by_name=True)

    # Opaque to us; non-string values are forwarded and the gateway rejects them.
    payment_method_nonce: StrictStr | StrictInt | StrictFloat | None = Field(
        default=None, alias="paymentMethodNonce"
    )
    # Decimal string or JSON number; the gateway does the parsing.
    amount: StrictStr | StrictInt | StrictFloat | None = None

    @field_validator("amount", mode="before")
    @classmethod
    def reject_boolean_amount(cls, value):
        """`false` reads as no amount; `true` is not an amount at all."""

        if value is False:
            return None
        if value is True:
            raise ValueError("amount must be a decimal string or number")
        return value

    def amount_text(self) -> str | None:
        """Amount as the gateway expects it, or None when absent/empty/zero."""

        if self.amount is None or self.amount == "" or self.amount == 0:
            return None
        return str(self.amount)


class CheckoutResult(BaseModel):
    """Client-facing checkout outcome. Unset fields are left out of the JSON body."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool
    transaction_id: str | None = Field(default=None, serialization_alias="transactionId")
    message: str | None = None

    def body(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)
