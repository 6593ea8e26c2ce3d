from datetime import datetime
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from relocation.app.use_cases.notifications import (
    ListNotificationsUseCase,
    MarkNotificationsReadUseCase,
)
from relocation.domain.entities import Notification, NotificationType

T0 = datetime(2026, 3, 1, 12, 0, 0)


def make_notification(recipient, is_read=False):
    return Notification(
        id=uuid4(),
        recipient_identity=recipient,
        type=NotificationType.agent_approved,
        title="Agent approval complete",
        message="Your agent account has been approved.",
        is_read=is_read,
        created_at=T0,
    )


@pytest.mark.asyncio
async def test_list_notifications(mock_uow, agent_caller):
    notification = make_notification(agent_caller.identity_reference)
    mock_uow.notifications.list_for_recipient = AsyncMock(return_value=[notification])

    result = await ListNotificationsUseCase(mock_uow).execute(agent_caller, unread_only=True)

    assert [n.id for n in result.value.notifications] == [notification.id]
    assert result.value.notifications[0].type == "agent_approved"
    mock_uow.notifications.list_for_recipient.assert_awaited_once_with(
        agent_caller.identity_reference, True, 50
    )


@pytest.mark.asyncio
async def test_mark_one_read(mock_uow, agent_caller):
    notification = make_notification(agent_caller.identity_reference)
    mock_uow.notifications.get_for_recipient.return_value = notification
    use_case = MarkNotificationsReadUseCase(mock_uow, clock=lambda: T0)

    result = await use_case.execute(agent_caller, notification_id=notification.id)

    assert result.value.updated == 1
    assert notification.is_read is True
    assert notification.read_at == T0
    mock_uow.notifications.get_for_recipient.assert_awaited_once_with(
        notification.id, agent_caller.identity_reference
    )
    mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_mark_read_notification_again(mock_uow, agent_caller):
    notification = make_notification(agent_caller.identity_reference, is_read=True)
    mock_uow.notifications.get_for_recipient.return_value = notification

    result = await MarkNotificationsReadUseCase(mock_uow).execute(
        agent_caller, notification_id=notification.id
    )

    assert result.value.updated == 0
    mock_uow.notifications.update.assert_not_awaited()


@pytest.mark.asyncio
async def test_mark_all_read(mock_uow, agent_caller):
    mock_uow.notifications.mark_all_read = AsyncMock(return_value=3)
    use_case = MarkNotificationsReadUseCase(mock_uow, clock=lambda: T0)

    result = await use_case.execute(agent_caller, mark_all=True)

    assert result.value.updated == 3
    mock_uow.notifications.mark_all_read.assert_awaited_once_with(
        agent_caller.identity_reference, T0
    )


@pytest.mark.asyncio
async def test_mark_read_requires_id(mock_uow, agent_caller):
    result = await MarkNotificationsReadUseCase(mock_uow).execute(agent_caller)

    assert result.error.code == "NOTIFICATION_ID_REQUIRED"


@pytest.mark.asyncio
async def test_mark_someone_elses_notification(mock_uow, agent_caller):
    mock_uow.notifications.get_for_recipient.return_value = None

    result = await MarkNotificationsReadUseCase(mock_uow).execute(
        agent_caller, notification_id=uuid4()
    )

    assert result.error.code == "NOTIFICATION_NOT_FOUND"
