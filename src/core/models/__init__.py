"""
Pydantic models for FuelBhai.
"""

from core.models.email import DeliveryResult, EmailMessage, VerificationEmailRequest
from core.models.session import (
    Importance,
    NotificationChannel,
    NotificationDescriptor,
    SessionState,
    StartMode,
)

__all__ = [
    "DeliveryResult",
    "EmailMessage",
    "Importance",
    "NotificationChannel",
    "NotificationDescriptor",
    "SessionState",
    "StartMode",
    "VerificationEmailRequest",
]
