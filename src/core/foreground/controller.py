"""Foreground session controller — begin/end a background trip session."""

import logging

from core.foreground.platform import API_LEVEL_O, HostPlatform
from core.foreground.service import TripForegroundService
from core.models.session import SessionState

logger = logging.getLogger(__name__)


class ForegroundSessionController:
    """Starts and stops the trip service on explicit request.

    Both operations are fire-and-forget. An OS refusal to elevate the
    service is logged and recorded in ``last_error``; it is never raised.
    """

    def __init__(self, platform: HostPlatform):
        self._platform = platform
        self._state = SessionState.STOPPED
        self.last_error: str | None = None

    @property
    def state(self) -> SessionState:
        return self._state

    def begin(self) -> None:
        self.last_error = None
        try:
            if self._platform.sdk_int >= API_LEVEL_O:
                self._platform.start_foreground_service(TripForegroundService)
            else:
                self._platform.start_service(TripForegroundService)
        except Exception as e:
            self.last_error = str(e)
            logger.exception("Failed to start trip foreground service")
            return
        self._state = SessionState.RUNNING

    def end(self) -> None:
        try:
            stopped = self._platform.stop_service(TripForegroundService)
        except Exception as e:
            self.last_error = str(e)
            logger.exception("Failed to stop trip foreground service")
        else:
            if not stopped:
                logger.debug("Stop requested with no trip service running")
        self._state = SessionState.STOPPED
