"""Foreground trip session: host seam, service lifecycle, controller, bridge."""

from core.foreground.bridge import CHANNEL_NAME, BridgeResult, BridgeStatus, ForegroundBridge, MethodCall
from core.foreground.controller import ForegroundSessionController
from core.foreground.platform import HostPlatform, LocalHostPlatform
from core.foreground.service import TripForegroundService


def get_foreground_bridge(platform: HostPlatform | None = None) -> ForegroundBridge:
    if platform is None:
        from core.config import get_config

        platform = LocalHostPlatform(sdk_int=get_config().android_sdk_int)
    return ForegroundBridge(ForegroundSessionController(platform))


__all__ = [
    "CHANNEL_NAME",
    "BridgeResult",
    "BridgeStatus",
    "ForegroundBridge",
    "ForegroundSessionController",
    "HostPlatform",
    "LocalHostPlatform",
    "MethodCall",
    "TripForegroundService",
    "get_foreground_bridge",
]
