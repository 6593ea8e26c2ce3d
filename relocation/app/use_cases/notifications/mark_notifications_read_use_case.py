"""
Mark Notifications Read Use Case
"""

from datetime import datetime
from typing import Callable, Optional
from uuid import UUID

from relocation.app.services.unit_of_work import UnitOfWork
from relocation.domain.base import utc_now
from relocation.domain.identity import CallerIdentity
from relocation.libs.result import Error, Result, Return

from .dtos import MarkNotificationsReadResponse


class MarkNotificationsReadUseCase:
    """
    Mark one notification, or all of them, as read.

    Business Rules:
    - Callers can only touch their own notifications
    - Marking an already read notification is a no-op that still succeeds
    """

    def __init__(self, uow: UnitOfWork, clock: Callable[[], datetime] = utc_now):
        self.uow = uow
        self.clock = clock

    async def execute(
        self,
        caller: CallerIdentity,
        notification_id: Optional[UUID] = None,
        mark_all: bool = False,
    ) -> Result[MarkNotificationsReadResponse]:
        if not mark_all and notification_id is None:
            return Return.err(
                Error("NOTIFICATION_ID_REQUIRED", "notification_id is required")
            )

        async with self.uow:
            now = self.clock()

            if mark_all:
                updated = await self.uow.notifications.mark_all_read(
                    caller.identity_reference, now
                )
                await self.uow.commit()
                return Return.ok(MarkNotificationsReadResponse(updated=updated))

            notification = await self.uow.notifications.get_for_recipient(
                notification_id, caller.identity_reference
            )
            if notification is None:
                return Return.err(
                    Error("NOTIFICATION_NOT_FOUND", "Notification not found")
                )

            if notification.is_read:
                return Return.ok(MarkNotificationsReadResponse(updated=0))

            notification.is_read = True
            notification.read_at = now
            await self.uow.notifications.update(notification)
            await self.uow.commit()

            return Return.ok(MarkNotificationsReadResponse(updated=1))
