from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from relocation.domain.entities import Notification


class INotificationRepository(ABC):
    """Notification repository interface - application layer"""

    @abstractmethod
    async def get_for_recipient(
        self, notification_id: UUID, recipient_identity: str
    ) -> Optional[Notification]:
        """Get a notification only if it belongs to the recipient"""
        pass

    @abstractmethod
    async def list_for_recipient(
        self, recipient_identity: str, unread_only: bool, limit: int
    ) -> List[Notification]:
        """Get a recipient's notifications, newest first"""
        pass

    @abstractmethod
    async def create(self, notification: Notification) -> Notification:
        """Create a new notification"""
        pass

    @abstractmethod
    async def update(self, notification: Notification) -> Notification:
        """Update existing notification"""
        pass

    @abstractmethod
    async def mark_all_read(self, recipient_identity: str, read_at: datetime) -> int:
        """Mark every unread notification of a recipient as read"""
        pass
