import pytest
from pydantic import ValidationError

from core.models import (
    DeliveryResult,
    Importance,
    NotificationChannel,
    NotificationDescriptor,
    VerificationEmailRequest,
)

VALID_REQUEST = dict(email="a@b.com", code="123456", name="Asha")


# --- VerificationEmailRequest ---


def test_request_valid():
    r = VerificationEmailRequest(**VALID_REQUEST)
    assert r.model_dump() == VALID_REQUEST


@pytest.mark.parametrize("field", ["email", "code", "name"])
def test_request_missing_field(field):
    with pytest.raises(ValidationError):
        VerificationEmailRequest(**{k: v for k, v in VALID_REQUEST.items() if k != field})


@pytest.mark.parametrize("field", ["email", "code", "name"])
def test_request_empty_field(field):
    with pytest.raises(ValidationError):
        VerificationEmailRequest(**{**VALID_REQUEST, field: ""})


def test_request_numeric_code_coerced():
    r = VerificationEmailRequest(**{**VALID_REQUEST, "code": 123456})
    assert r.code == "123456"


def test_request_ignores_extra_fields():
    r = VerificationEmailRequest(**VALID_REQUEST, locale="hi")
    assert not hasattr(r, "locale")


# --- DeliveryResult ---


def test_delivery_result_ok():
    result = DeliveryResult.ok()
    assert result.success is True
    assert result.message == "Email sent successfully"
    assert result.details is None


def test_delivery_result_err():
    result = DeliveryResult.err("Invalid API key")
    assert result.success is False
    assert result.message == "Failed to send email"
    assert result.details == "Invalid API key"


# --- Notification models ---


def test_notification_channel_is_silent_high_importance():
    channel = NotificationChannel()
    assert channel.channel_id == "trip_tracker_channel"
    assert channel.name == "Trip Tracker"
    assert channel.importance == Importance.HIGH
    assert channel.sound is None
    assert channel.vibration is False
    assert channel.lights is False


def test_notification_descriptor_is_ongoing():
    descriptor = NotificationDescriptor()
    assert descriptor.notification_id == 1001
    assert descriptor.title == "Trip in Progress"
    assert descriptor.text == "Tracking your trip..."
    assert descriptor.ongoing is True
    assert descriptor.auto_cancel is False
    assert descriptor.silent is True


def test_notification_descriptor_is_immutable():
    with pytest.raises(ValidationError):
        NotificationDescriptor().title = "Other"  # type: ignore[misc]


@pytest.mark.parametrize("value", [0, False, None])
def test_request_falsy_code_rejected(value):
    with pytest.raises(ValidationError):
        VerificationEmailRequest(**{**VALID_REQUEST, "code": value})
