from os import environ

from pydantic import BaseModel, ConfigDict

from core.clients import get_secrets_client

DEFAULT_SENDER_EMAIL = "YOUR_VERIFIED_SENDER_EMAIL@example.com"
DEFAULT_EMAIL_SUBJECT = "FuelBhai - Email Verification Code"

_cached_email_api_key: str | None = None


def _resolve_email_api_key(region: str) -> str:
    """Fetch the email provider API key from Secrets Manager at runtime, with caching."""
    global _cached_email_api_key
    if _cached_email_api_key is not None:
        return _cached_email_api_key

    # Local dev: use env var directly
    direct = environ.get("EMAIL_API_KEY", "")
    if direct:
        _cached_email_api_key = direct
        return direct

    # Deployed: fetch from Secrets Manager by ARN
    arn = environ.get("EMAIL_API_KEY_SECRET_ARN", "")
    if not arn:
        return ""

    client = get_secrets_client(region)
    _cached_email_api_key = client.get_secret_value(SecretId=arn)["SecretString"]
    return _cached_email_api_key


class Config(BaseModel):
    model_config = ConfigDict(frozen=True)

    aws_region: str
    environment: str
    log_level: str = "INFO"
    email_api_key: str = ""
    sender_email: str = DEFAULT_SENDER_EMAIL
    email_subject: str = DEFAULT_EMAIL_SUBJECT
    code_expiry_minutes: int = 10
    android_sdk_int: int = 34


_cached_config: Config | None = None


def _reset_config() -> None:
    """Reset cached config — for testing only."""
    global _cached_config, _cached_email_api_key
    _cached_config = None
    _cached_email_api_key = None
    get_secrets_client.cache_clear()


def get_config() -> Config:
    global _cached_config
    if _cached_config is not None:
        return _cached_config

    aws_region = environ.get("AWS_REGION", "us-east-1")
    _cached_config = Config(
        aws_region=aws_region,
        environment=environ.get("ENVIRONMENT", "local"),
        log_level=environ.get("LOG_LEVEL", "INFO"),
        email_api_key=_resolve_email_api_key(aws_region),
        sender_email=environ.get("SENDER_EMAIL", DEFAULT_SENDER_EMAIL),
        email_subject=environ.get("EMAIL_SUBJECT", DEFAULT_EMAIL_SUBJECT),
        code_expiry_minutes=int(environ.get("CODE_EXPIRY_MINUTES", "10")),
        android_sdk_int=int(environ.get("ANDROID_SDK_INT", "34")),
    )
    return _cached_config
