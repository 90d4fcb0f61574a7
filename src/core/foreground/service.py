"""Long-running trip service promoted to the foreground while a trip is active."""

import logging

from core.foreground.platform import API_LEVEL_O, HostPlatform
from core.models.session import NotificationChannel, NotificationDescriptor, StartMode

logger = logging.getLogger(__name__)


class TripForegroundService:
    CHANNEL = NotificationChannel()
    NOTIFICATION = NotificationDescriptor()

    def __init__(self, platform: HostPlatform):
        self._platform = platform

    def on_create(self) -> None:
        self._create_notification_channel()

    def on_start_command(self) -> StartMode:
        self._platform.start_foreground(self.NOTIFICATION)
        logger.info("Trip service in foreground (notification %d)", self.NOTIFICATION.notification_id)
        return StartMode.STICKY

    def on_destroy(self) -> None:
        self._platform.stop_foreground(remove_notification=True)
        logger.info("Trip service destroyed")

    def _create_notification_channel(self) -> None:
        if self._platform.sdk_int >= API_LEVEL_O:
            self._platform.create_notification_channel(self.CHANNEL)
