from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class VerificationEmailRequest(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    email: str = Field(..., min_length=1)
    code: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)

    @field_validator("email", "code", "name", mode="before")
    @classmethod
    def reject_falsy(cls, value: Any) -> Any:
        # 0 and false count as missing, like an empty string.
        if not value:
            raise ValueError("field is required")
        return value


class EmailMessage(BaseModel):
    model_config = ConfigDict(frozen=True)

    to: str
    sender: str
    subject: str
    html: str
    text: str


class DeliveryResult(BaseModel):
    """Outcome of a single send attempt. Never persisted."""

    model_config = ConfigDict(frozen=True)

    success: bool
    message: str
    details: str | None = None

    @classmethod
    def ok(cls, message: str = "Email sent successfully") -> "DeliveryResult":
        return cls(success=True, message=message)

    @classmethod
    def err(cls, details: str, message: str = "Failed to send email") -> "DeliveryResult":
        return cls(success=False, message=message, details=details)
