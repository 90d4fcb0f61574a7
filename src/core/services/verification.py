"""Verification email service — one render, one send, no retry."""

import logging

from core.config import Config
from core.email.interface import EmailProvider
from core.email.templates import render_verification_email
from core.errors import DeliveryError
from core.models.email import DeliveryResult, VerificationEmailRequest

logger = logging.getLogger(__name__)


async def send_verification_email(
    request: VerificationEmailRequest,
    provider: EmailProvider,
    config: Config,
) -> DeliveryResult:
    message = render_verification_email(
        request,
        sender=config.sender_email,
        subject=config.email_subject,
        expiry_minutes=config.code_expiry_minutes,
    )

    try:
        message_id = await provider.send(message)
    except DeliveryError as e:
        logger.error("Error sending email to %s: %s", request.email, e.message)
        return DeliveryResult.err(e.message)

    logger.info("Verification email sent to %s (id=%s)", request.email, message_id)
    return DeliveryResult.ok()
