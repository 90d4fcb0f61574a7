from abc import ABC, abstractmethod

from core.models.email import EmailMessage


class EmailProvider(ABC):
    @abstractmethod
    async def send(self, message: EmailMessage) -> str:
        """Submit one message; returns the provider's message id."""
        ...


def get_email_provider() -> EmailProvider:
    from core.config import get_config
    from core.errors import ConfigurationError, ErrorCode

    config = get_config()
    api_key = config.email_api_key
    if not api_key:
        raise ConfigurationError("EMAIL_API_KEY not configured", code=ErrorCode.PROVIDER_NOT_CONFIGURED)

    from core.email.resend_provider import ResendEmailProvider

    return ResendEmailProvider(api_key=api_key)
