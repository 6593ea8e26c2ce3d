from typing import Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from relocation.api.error import ClientError, ServerError
from relocation.app.services.unit_of_work import UnitOfWork
from relocation.app.use_cases.clients import (
    ListAgentClientsResponse,
    ListAgentClientsUseCase,
    RegisterClientResponse,
    RegisterClientUseCase,
)
from relocation.app.use_cases.invitations import (
    RedeemInvitationResponse,
    RedeemInvitationUseCase,
)
from relocation.app.use_cases.invitations.errors import INVALID_CODE_FORMAT
from relocation.depends import get_unit_of_work, require_agent, require_client
from relocation.domain.identity import CallerIdentity
from relocation.domain.invitation_policy import is_well_formed_code
from relocation.libs.result import Error

router = APIRouter(prefix="/clients", tags=["Clients"])

REDEEM_ERROR_STATUS = {
    "CLIENT_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "INVITATION_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "ALREADY_ASSIGNED": status.HTTP_409_CONFLICT,
    "INVITATION_ALREADY_USED": status.HTTP_409_CONFLICT,
    "INVITATION_EXPIRED": status.HTTP_410_GONE,
    "AGENT_NOT_APPROVED": status.HTTP_403_FORBIDDEN,
}


def raise_redeem_error(error: Error):
    status_code = REDEEM_ERROR_STATUS.get(error.code)
    if status_code is None:
        raise ServerError(error)
    raise ClientError(error, status_code=status_code)


class RegisterClientRequest(BaseModel):
    """Client sign-up payload, optionally carrying an invitation link token"""

    invitation_token: Optional[str] = Field(None, max_length=36)


class AssignByCodeRequest(BaseModel):
    """Assign-by-code HTTP request payload"""

    code: str = Field(..., min_length=1, max_length=32, description="Invitation code")


@router.get(
    "",
    status_code=status.HTTP_200_OK,
    response_model=ListAgentClientsResponse,
)
async def list_agent_clients(
    caller: CallerIdentity = Depends(require_agent),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List My Clients

    Returns the clients assigned to the calling agent, newest first.

    Raises:
        - 401 Unauthorized: Invalid or expired token
        - 403 Forbidden: Caller is not an agent
    """
    use_case = ListAgentClientsUseCase(uow)
    result = await use_case.execute(caller)

    if result.is_err():
        raise ServerError(result.error)

    return result.value


@router.post(
    "/me",
    status_code=status.HTTP_200_OK,
    response_model=RegisterClientResponse,
)
async def register_client(
    request: RegisterClientRequest,
    caller: CallerIdentity = Depends(require_client),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Register Client

    Creates the caller's client record on first call. When an invitation
    token is supplied and the client has no agent yet, the invitation is
    redeemed in the same request.

    The record is committed before the token is redeemed. An error below
    therefore does not undo the sign-up: the client exists, unassigned, and
    a later call returns it with created=false.

    Raises:
        - 401 Unauthorized: Invalid or expired token
        - 403 Forbidden: AGENT_NOT_APPROVED, or caller is not a client
        - 404 Not Found: INVITATION_NOT_FOUND
        - 409 Conflict: ALREADY_ASSIGNED, INVITATION_ALREADY_USED
        - 410 Gone: INVITATION_EXPIRED
    """
    use_case = RegisterClientUseCase(uow)
    result = await use_case.execute(caller, request.invitation_token)

    if result.is_err():
        raise_redeem_error(result.error)

    return result.value


@router.post(
    "/me/assign-by-code",
    status_code=status.HTTP_200_OK,
    response_model=RedeemInvitationResponse,
)
async def assign_by_code(
    request: AssignByCodeRequest,
    caller: CallerIdentity = Depends(require_client),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Assign Client By Code

    Redeems an invitation code and assigns the caller to the issuing agent.
    Codes are matched case-insensitively.

    Raises:
        - 400 Bad Request: INVALID_CODE_FORMAT
        - 401 Unauthorized: Invalid or expired token
        - 403 Forbidden: AGENT_NOT_APPROVED, or caller is not a client
        - 404 Not Found: CLIENT_NOT_FOUND, INVITATION_NOT_FOUND
        - 409 Conflict: ALREADY_ASSIGNED, INVITATION_ALREADY_USED
        - 410 Gone: INVITATION_EXPIRED
    """
    if not is_well_formed_code(request.code):
        raise ClientError(INVALID_CODE_FORMAT, status_code=status.HTTP_400_BAD_REQUEST)

    use_case = RedeemInvitationUseCase(uow)
    result = await use_case.execute(caller, request.code)

    if result.is_err():
        raise_redeem_error(result.error)

    return result.value
