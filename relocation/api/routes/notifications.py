from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel

from relocation.api.error import ClientError, ServerError
from relocation.app.services.unit_of_work import UnitOfWork
from relocation.app.use_cases.notifications import (
    ListNotificationsResponse,
    ListNotificationsUseCase,
    MarkNotificationsReadResponse,
    MarkNotificationsReadUseCase,
)
from relocation.depends import get_current_caller, get_unit_of_work
from relocation.domain.identity import CallerIdentity

router = APIRouter(prefix="/notifications", tags=["Notifications"])


class MarkReadRequest(BaseModel):
    notification_id: Optional[UUID] = None
    mark_all: bool = False


@router.get(
    "",
    status_code=status.HTTP_200_OK,
    response_model=ListNotificationsResponse,
)
async def list_notifications(
    unread_only: bool = Query(False),
    caller: CallerIdentity = Depends(get_current_caller),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """List the caller's notifications, newest first."""
    use_case = ListNotificationsUseCase(uow)
    result = await use_case.execute(caller, unread_only)

    if result.is_err():
        raise ServerError(result.error)

    return result.value


@router.patch(
    "",
    status_code=status.HTTP_200_OK,
    response_model=MarkNotificationsReadResponse,
)
async def mark_notifications_read(
    request: MarkReadRequest,
    caller: CallerIdentity = Depends(get_current_caller),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Mark Notifications Read

    Marks one notification, or all of the caller's unread notifications.

    Raises:
        - 400 Bad Request: NOTIFICATION_ID_REQUIRED
        - 404 Not Found: NOTIFICATION_NOT_FOUND
    """
    use_case = MarkNotificationsReadUseCase(uow)
    result = await use_case.execute(caller, request.notification_id, request.mark_all)

    if result.is_err():
        error = result.error
        if error.code == "NOTIFICATION_ID_REQUIRED":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        elif error.code == "NOTIFICATION_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        else:
            raise ServerError(error)

    return result.value
