"""Unit tests for the foreground method-call bridge."""

from unittest.mock import MagicMock

import pytest

from core.foreground import CHANNEL_NAME, BridgeStatus, MethodCall, get_foreground_bridge
from core.foreground.bridge import ForegroundBridge
from core.models.session import SessionState


def test_channel_name():
    assert CHANNEL_NAME == "fuelbhai/foreground_service"


def test_start_foreground_calls_begin():
    controller = MagicMock()
    bridge = ForegroundBridge(controller)

    result = bridge.handle(MethodCall(method="startForeground"))

    assert result.status == BridgeStatus.SUCCESS
    assert result.payload is None
    controller.begin.assert_called_once_with()
    controller.end.assert_not_called()


def test_stop_foreground_calls_end():
    controller = MagicMock()
    bridge = ForegroundBridge(controller)

    result = bridge.handle(MethodCall(method="stopForeground"))

    assert result.status == BridgeStatus.SUCCESS
    controller.end.assert_called_once_with()


@pytest.mark.parametrize("method", ["updateNotification", "", "startforeground"])
def test_unknown_method_not_implemented(method):
    controller = MagicMock()
    bridge = ForegroundBridge(controller)

    result = bridge.handle(MethodCall(method=method))

    assert result.status == BridgeStatus.NOT_IMPLEMENTED
    controller.begin.assert_not_called()
    controller.end.assert_not_called()


def test_round_trip_against_local_platform(local_platform):
    bridge = get_foreground_bridge(local_platform)

    assert bridge.handle(MethodCall(method="startForeground")).status == BridgeStatus.SUCCESS
    assert bridge.controller.state == SessionState.RUNNING

    assert bridge.handle(MethodCall(method="stopForeground")).status == BridgeStatus.SUCCESS
    assert bridge.controller.state == SessionState.STOPPED


def test_default_bridge_uses_configured_sdk(monkeypatch):
    monkeypatch.setenv("ANDROID_SDK_INT", "25")

    bridge = get_foreground_bridge()
    bridge.handle(MethodCall(method="startForeground"))

    assert bridge.controller.state == SessionState.RUNNING
