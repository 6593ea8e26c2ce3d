"""
List Notifications Use Case
"""

from relocation.app.services.unit_of_work import UnitOfWork
from relocation.domain.identity import CallerIdentity
from relocation.libs.result import Result, Return

from .dtos import ListNotificationsResponse, NotificationResponse

NOTIFICATION_LIMIT = 50


class ListNotificationsUseCase:
    """The caller's latest notifications, newest first"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, caller: CallerIdentity, unread_only: bool = False
    ) -> Result[ListNotificationsResponse]:
        async with self.uow:
            notifications = await self.uow.notifications.list_for_recipient(
                caller.identity_reference, unread_only, NOTIFICATION_LIMIT
            )
            return Return.ok(
                ListNotificationsResponse(
                    notifications=[
                        NotificationResponse(
                            id=n.id,
                            type=n.type.value,
                            title=n.title,
                            message=n.message,
                            metadata=n.event_metadata,
                            is_read=n.is_read,
                            read_at=n.read_at,
                            created_at=n.created_at,
                        )
                        for n in notifications
                    ]
                )
            )
