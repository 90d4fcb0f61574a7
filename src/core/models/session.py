from enum import Enum

from pydantic import BaseModel, ConfigDict

TRIP_CHANNEL_ID = "trip_tracker_channel"
TRIP_NOTIFICATION_ID = 1001


class SessionState(str, Enum):
    STOPPED = "STOPPED"
    RUNNING = "RUNNING"


class Importance(str, Enum):
    HIGH = "HIGH"


class StartMode(str, Enum):
    """What the host should do if it reclaims the service process."""

    STICKY = "STICKY"


class NotificationChannel(BaseModel):
    model_config = ConfigDict(frozen=True)

    channel_id: str = TRIP_CHANNEL_ID
    name: str = "Trip Tracker"
    description: str = "Ongoing trip tracking notifications"
    importance: Importance = Importance.HIGH
    show_badge: bool = True
    lights: bool = False
    vibration: bool = False
    sound: str | None = None


class NotificationDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True)

    notification_id: int = TRIP_NOTIFICATION_ID
    channel_id: str = TRIP_CHANNEL_ID
    title: str = "Trip in Progress"
    text: str = "Tracking your trip..."
    small_icon: str = "ic_menu_mylocation"
    priority: Importance = Importance.HIGH
    ongoing: bool = True
    auto_cancel: bool = False
    silent: bool = True
