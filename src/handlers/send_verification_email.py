"""HTTP Lambda handler — sends a verification-code email."""

import asyncio
import base64
import json
import logging
from typing import Any

import pydantic

from core.config import get_config
from core.email import get_email_provider
from core.errors import ErrorCode, FuelBhaiError, USER_MESSAGES, ValidationError
from core.models.email import VerificationEmailRequest
from core.services.verification import send_verification_email

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST",
    "Access-Control-Allow-Headers": "Content-Type",
}


def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    method = _http_method(event)

    if method == "OPTIONS":
        return _response(204, "")
    if method != "POST":
        return _response(405, USER_MESSAGES[ErrorCode.METHOD_NOT_ALLOWED], content_type="text/plain")

    try:
        request = VerificationEmailRequest.model_validate(_parse_body(event))
    except (ValidationError, pydantic.ValidationError):
        return _json_response(400, {"error": USER_MESSAGES[ErrorCode.MISSING_FIELDS]})
    except Exception:
        logger.exception("Unexpected error reading request body")
        return _json_response(400, {"error": USER_MESSAGES[ErrorCode.MISSING_FIELDS]})

    try:
        config = get_config()
        logging.getLogger().setLevel(config.log_level)

        # EmailProvider.send is async; asyncio.run() bridges it in this sync handler.
        provider = get_email_provider()
        result = asyncio.run(send_verification_email(request, provider, config))
    except FuelBhaiError as e:
        logger.error("Error sending email: %s", e.message)
        return _json_response(500, {"error": e.user_message, "details": e.message})
    except Exception as e:
        logger.exception("Unexpected error sending email")
        return _json_response(500, {"error": USER_MESSAGES[ErrorCode.DELIVERY_FAILED], "details": str(e)})

    if not result.success:
        return _json_response(500, {"error": result.message, "details": result.details})
    return _json_response(200, {"success": True, "message": result.message})


def _http_method(event: dict[str, Any]) -> str:
    # REST API (v1) events carry httpMethod; HTTP API (v2) events nest it.
    http = (event.get("requestContext") or {}).get("http") or {}
    method = event.get("httpMethod") or http.get("method") or ""
    return str(method).upper()


def _parse_body(event: dict[str, Any]) -> dict[str, Any]:
    body = event.get("body") or ""
    if isinstance(body, dict):
        return body
    try:
        if event.get("isBase64Encoded"):
            body = base64.b64decode(body).decode("utf-8")
        parsed = json.loads(body) if body else {}
    except ValueError as e:
        raise ValidationError(f"Unreadable request body: {e}", code=ErrorCode.INVALID_REQUEST) from e
    if not isinstance(parsed, dict):
        raise ValidationError("Request body must be a JSON object", code=ErrorCode.INVALID_REQUEST)
    return parsed


def _json_response(status_code: int, payload: dict[str, Any]) -> dict[str, Any]:
    return _response(status_code, json.dumps(payload), content_type="application/json")


def _response(status_code: int, body: str, content_type: str | None = None) -> dict[str, Any]:
    headers = dict(CORS_HEADERS)
    if content_type:
        headers["Content-Type"] = content_type
    return {"statusCode": status_code, "headers": headers, "body": body}
