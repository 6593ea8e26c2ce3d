from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy import update
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from relocation.app.repositories.notification_repository import INotificationRepository
from relocation.domain.entities import Notification


class NotificationRepository(INotificationRepository):
    """Notification repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_for_recipient(
        self, notification_id: UUID, recipient_identity: str
    ) -> Optional[Notification]:
        stmt = select(Notification).where(
            Notification.id == notification_id,
            Notification.recipient_identity == recipient_identity,
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_for_recipient(
        self, recipient_identity: str, unread_only: bool, limit: int
    ) -> List[Notification]:
        stmt = select(Notification).where(
            Notification.recipient_identity == recipient_identity
        )
        if unread_only:
            stmt = stmt.where(col(Notification.is_read).is_(False))
        stmt = stmt.order_by(col(Notification.created_at).desc()).limit(limit)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, notification: Notification) -> Notification:
        self.session.add(notification)
        await self.session.flush()
        await self.session.refresh(notification)
        return notification

    async def update(self, notification: Notification) -> Notification:
        self.session.add(notification)
        await self.session.flush()
        await self.session.refresh(notification)
        return notification

    async def mark_all_read(self, recipient_identity: str, read_at: datetime) -> int:
        stmt = (
            update(Notification)
            .where(
                col(Notification.recipient_identity) == recipient_identity,
                col(Notification.is_read).is_(False),
            )
            .values(is_read=True, read_at=read_at)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return result.rowcount
