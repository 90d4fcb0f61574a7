"""Host OS seam for the foreground trip session.

`HostPlatform` is the surface the session controller and the service need
from the operating system. `LocalHostPlatform` keeps that OS-side state in
memory so the controller runs off-device.
"""

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Callable

from core.errors import ErrorCode, HostPermissionError
from core.models.session import NotificationChannel, NotificationDescriptor, StartMode

if TYPE_CHECKING:
    from core.foreground.service import TripForegroundService

logger = logging.getLogger(__name__)

# First API level with notification channels and startForegroundService.
API_LEVEL_O = 26

ServiceFactory = Callable[["HostPlatform"], "TripForegroundService"]


class HostPlatform(ABC):
    @property
    @abstractmethod
    def sdk_int(self) -> int: ...

    @abstractmethod
    def create_notification_channel(self, channel: NotificationChannel) -> None: ...

    @abstractmethod
    def start_foreground_service(self, factory: ServiceFactory) -> None: ...

    @abstractmethod
    def start_service(self, factory: ServiceFactory) -> None: ...

    @abstractmethod
    def stop_service(self, factory: ServiceFactory) -> bool:
        """Stop the service if running; returns whether anything was stopped."""
        ...

    @abstractmethod
    def start_foreground(self, descriptor: NotificationDescriptor) -> None: ...

    @abstractmethod
    def stop_foreground(self, remove_notification: bool) -> None: ...


class LocalHostPlatform(HostPlatform):
    def __init__(self, sdk_int: int = 34, foreground_permitted: bool = True):
        self._sdk_int = sdk_int
        self.foreground_permitted = foreground_permitted
        self.channels: dict[str, NotificationChannel] = {}
        self.notifications: dict[int, NotificationDescriptor] = {}
        self.services: dict[ServiceFactory, "TripForegroundService"] = {}
        self.start_modes: list[StartMode] = []
        self._foreground_id: int | None = None

    @property
    def sdk_int(self) -> int:
        return self._sdk_int

    @property
    def in_foreground(self) -> bool:
        return self._foreground_id is not None

    def create_notification_channel(self, channel: NotificationChannel) -> None:
        # Re-registering an existing id replaces it, like the real NotificationManager.
        self.channels[channel.channel_id] = channel

    def start_foreground_service(self, factory: ServiceFactory) -> None:
        self._start(factory)

    def start_service(self, factory: ServiceFactory) -> None:
        self._start(factory)

    def _start(self, factory: ServiceFactory) -> None:
        service = self.services.get(factory)
        if service is None:
            service = factory(self)
            service.on_create()
        # A service that fails to reach the foreground is never registered.
        self.start_modes.append(service.on_start_command())
        self.services[factory] = service

    def stop_service(self, factory: ServiceFactory) -> bool:
        service = self.services.pop(factory, None)
        if service is None:
            return False
        service.on_destroy()
        return True

    def start_foreground(self, descriptor: NotificationDescriptor) -> None:
        if not self.foreground_permitted:
            raise HostPermissionError(
                "Foreground service permission not granted",
                code=ErrorCode.PERMISSION_DENIED,
            )
        self.notifications[descriptor.notification_id] = descriptor
        self._foreground_id = descriptor.notification_id

    def stop_foreground(self, remove_notification: bool) -> None:
        if remove_notification and self._foreground_id is not None:
            self.notifications.pop(self._foreground_id, None)
        self._foreground_id = None
