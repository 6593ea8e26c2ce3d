from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field

from config import ApplicationConfig
from relocation.api.error import ClientError, ServerError
from relocation.app.services.unit_of_work import UnitOfWork
from relocation.app.use_cases.invitations import (
    CreateInvitationUseCase,
    InvitationResponse,
    ListInvitationsResponse,
    ListInvitationsUseCase,
    VerifyInvitationResponse,
    VerifyInvitationUseCase,
)
from relocation.app.use_cases.invitations.errors import INVALID_CODE_FORMAT
from relocation.depends import get_unit_of_work, require_agent
from relocation.domain.identity import CallerIdentity
from relocation.domain.invitation_policy import (
    MAX_VALIDITY_DAYS,
    MIN_VALIDITY_DAYS,
    is_well_formed_code,
)
from relocation.libs.result import Error

router = APIRouter(prefix="/invitations", tags=["Invitations"])


class CreateInvitationRequest(BaseModel):
    """
    Create invitation HTTP request payload

    The email is a hint for the agent's own bookkeeping and is never enforced.
    """

    email: Optional[str] = Field(None, max_length=255, description="Intended client email")
    expires_in_days: int = Field(
        ApplicationConfig.INVITATION_DEFAULT_VALIDITY_DAYS,
        ge=MIN_VALIDITY_DAYS,
        le=MAX_VALIDITY_DAYS,
        description="Validity window in days",
    )


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=InvitationResponse,
)
async def create_invitation(
    request: CreateInvitationRequest,
    caller: CallerIdentity = Depends(require_agent),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Invitation

    Creates a single-use invitation with a 6-character code and a link token.

    Raises:
        - 400 Bad Request: INVALID_VALIDITY_DAYS
        - 401 Unauthorized: Invalid or expired token
        - 403 Forbidden: Caller is not an agent
        - 500 Internal Server Error: CODE_GENERATION_EXHAUSTED
    """
    use_case = CreateInvitationUseCase(
        uow,
        base_url=ApplicationConfig.APP_BASE_URL,
        max_code_attempts=ApplicationConfig.INVITATION_CODE_MAX_ATTEMPTS,
    )
    result = await use_case.execute(caller, request.email, request.expires_in_days)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_VALIDITY_DAYS":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return result.value


@router.get(
    "",
    status_code=status.HTTP_200_OK,
    response_model=ListInvitationsResponse,
)
async def list_invitations(
    caller: CallerIdentity = Depends(require_agent),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List Invitations

    Returns the caller's invitations, newest first, with expiry and usage flags.
    """
    use_case = ListInvitationsUseCase(uow, base_url=ApplicationConfig.APP_BASE_URL)
    result = await use_case.execute(caller)

    if result.is_err():
        raise ServerError(result.error)

    return result.value


@router.get(
    "/verify-code",
    status_code=status.HTTP_200_OK,
    response_model=VerifyInvitationResponse,
)
async def verify_invitation_code(
    code: str = Query(..., description="6-character invitation code"),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Verify Invitation Code

    Public preview used by the sign-up page. Does not consume the invitation.
    An expired or used invitation returns 200 with valid=false and a reason.

    Raises:
        - 400 Bad Request: INVALID_CODE_FORMAT
        - 404 Not Found: INVITATION_NOT_FOUND
    """
    if not is_well_formed_code(code):
        raise ClientError(INVALID_CODE_FORMAT, status_code=status.HTTP_400_BAD_REQUEST)

    use_case = VerifyInvitationUseCase(uow)
    result = await use_case.execute_by_code(code)

    if result.is_err():
        error = result.error
        if error.code == "INVITATION_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


@router.get(
    "/verify",
    status_code=status.HTTP_200_OK,
    response_model=VerifyInvitationResponse,
)
async def verify_invitation_token(
    token: str = Query(..., description="Invitation link token"),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Verify Invitation Token

    Same as verify-code, for link-based invitations.

    Raises:
        - 400 Bad Request: INVALID_TOKEN_FORMAT
        - 404 Not Found: INVITATION_NOT_FOUND
    """
    try:
        token = str(UUID(token))
    except ValueError:
        raise ClientError(
            Error("INVALID_TOKEN_FORMAT", "Invalid invitation token format"),
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    use_case = VerifyInvitationUseCase(uow)
    result = await use_case.execute_by_token(token)

    if result.is_err():
        error = result.error
        if error.code == "INVITATION_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value
