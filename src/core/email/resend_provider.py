from typing import Any

import resend

from core.errors import DeliveryError, ErrorCode
from core.models.email import EmailMessage

from .interface import EmailProvider


class ResendEmailProvider(EmailProvider):
    def __init__(self, api_key: str):
        self._api_key = api_key

    async def send(self, message: EmailMessage) -> str:
        # The Resend SDK reads its key from module state.
        resend.api_key = self._api_key
        params: dict[str, Any] = {
            "from": message.sender,
            "to": [message.to],
            "subject": message.subject,
            "html": message.html,
            "text": message.text,
        }
        try:
            response = resend.Emails.send(params)
        except Exception as e:
            raise DeliveryError(str(e), code=ErrorCode.DELIVERY_FAILED) from e
        return str(response.get("id", ""))
