"""
Notification Use Case DTOs (Data Transfer Objects)
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel


class NotificationResponse(BaseModel):
    id: UUID
    type: str
    title: str
    message: str
    metadata: Optional[dict] = None
    is_read: bool
    read_at: Optional[datetime] = None
    created_at: datetime


class ListNotificationsResponse(BaseModel):
    """Response for list notifications use case"""

    notifications: List[NotificationResponse]


class MarkNotificationsReadResponse(BaseModel):
    """Response for mark notifications read use case"""

    updated: int
