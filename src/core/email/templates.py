"""Verification email rendering (HTML + plain text)."""

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from core.models.email import EmailMessage, VerificationEmailRequest

TEMPLATES_DIR = Path(__file__).parent / "templates"

# Inputs are inserted verbatim, without HTML escaping.
_env = Environment(
    loader=FileSystemLoader(str(TEMPLATES_DIR)),
    autoescape=False,
    undefined=StrictUndefined,
    keep_trailing_newline=False,
)


def render_verification_email(
    request: VerificationEmailRequest,
    sender: str,
    subject: str,
    expiry_minutes: int = 10,
) -> EmailMessage:
    context = {"name": request.name, "code": request.code, "expiry_minutes": expiry_minutes}
    return EmailMessage(
        to=request.email,
        sender=sender,
        subject=subject,
        html=_env.get_template("verification.html").render(**context),
        text=_env.get_template("verification.txt").render(**context),
    )
