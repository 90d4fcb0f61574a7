"""Method-call bridge between the app layer and the session controller."""

import logging
from enum import Enum
from typing import Any, Callable

from pydantic import BaseModel

from core.foreground.controller import ForegroundSessionController

logger = logging.getLogger(__name__)

CHANNEL_NAME = "fuelbhai/foreground_service"


class MethodCall(BaseModel):
    method: str
    arguments: dict[str, Any] | None = None


class BridgeStatus(str, Enum):
    SUCCESS = "success"
    NOT_IMPLEMENTED = "not_implemented"


class BridgeResult(BaseModel):
    status: BridgeStatus
    payload: Any = None

    @classmethod
    def success(cls, payload: Any = None) -> "BridgeResult":
        return cls(status=BridgeStatus.SUCCESS, payload=payload)

    @classmethod
    def not_implemented(cls) -> "BridgeResult":
        return cls(status=BridgeStatus.NOT_IMPLEMENTED)


class ForegroundBridge:
    def __init__(self, controller: ForegroundSessionController, channel_name: str = CHANNEL_NAME):
        self.channel_name = channel_name
        self.controller = controller
        self._methods: dict[str, Callable[[], None]] = {
            "startForeground": controller.begin,
            "stopForeground": controller.end,
        }

    def handle(self, call: MethodCall) -> BridgeResult:
        method = self._methods.get(call.method)
        if method is None:
            logger.warning("Unknown method %r on %s", call.method, self.channel_name)
            return BridgeResult.not_implemented()
        method()
        return BridgeResult.success()
