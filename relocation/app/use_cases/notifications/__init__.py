"""
Notification Use Cases
"""

from .dtos import (
    ListNotificationsResponse,
    MarkNotificationsReadResponse,
    NotificationResponse,
)
from .list_notifications_use_case import ListNotificationsUseCase
from .mark_notifications_read_use_case import MarkNotificationsReadUseCase

__all__ = [
    "ListNotificationsUseCase",
    "MarkNotificationsReadUseCase",
    "ListNotificationsResponse",
    "MarkNotificationsReadResponse",
    "NotificationResponse",
]
