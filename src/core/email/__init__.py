"""Transactional email abstraction layer."""

from core.email.interface import EmailProvider, get_email_provider
from core.email.resend_provider import ResendEmailProvider
from core.email.templates import render_verification_email

__all__ = ["EmailProvider", "ResendEmailProvider", "get_email_provider", "render_verification_email"]
