"""
Notification Entity

Messages shown to a user in the application.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import JSON, Column, DateTime, Field, Index, SQLModel

from ..base import utc_now
from .enums import NotificationType


class Notification(SQLModel, table=True):
    """
    Notification entity - addressed to an identity, not a role-specific record.

    Business Rules:
    - Created by system actions (agent approval or rejection)
    - Only the recipient can read or mark them as read
    """

    __tablename__ = "notifications"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    recipient_identity: str = Field(index=True, max_length=255)

    type: NotificationType = Field(nullable=False)
    title: str = Field(max_length=255)
    message: str = Field(max_length=1000)
    event_metadata: Optional[dict] = Field(default=None, sa_column=Column(JSON))

    is_read: bool = Field(default=False)
    read_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    # Timestamps
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_notification_recipient_read", "recipient_identity", "is_read"),
    )
