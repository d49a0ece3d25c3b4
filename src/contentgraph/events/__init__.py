"""
Notifications emitted by the registry on every committed mutation.
"""

from contentgraph.events.notifications import (
    Notification,
    NodeRegistered,
    NodeStatusUpdated,
    LinkCreated,
    LinkStatusUpdated,
    OwnershipTransferred,
)
from contentgraph.events.event_bus import EventBus, RecordedEvent

__all__ = [
    "Notification",
    "NodeRegistered",
    "NodeStatusUpdated",
    "LinkCreated",
    "LinkStatusUpdated",
    "OwnershipTransferred",
    "EventBus",
    "RecordedEvent",
]
