from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from relocation.api.error import ClientError, ServerError
from relocation.app.services.unit_of_work import UnitOfWork
from relocation.app.use_cases.agents import (
    AgentProfileResponse,
    AgentStatusResponse,
    CompleteAgentProfileUseCase,
    GetAgentStatusUseCase,
    SignInAgentResponse,
    SignInAgentUseCase,
)
from relocation.depends import get_unit_of_work, require_agent
from relocation.domain.identity import CallerIdentity

router = APIRouter(prefix="/agents", tags=["Agents"])


class CompleteProfileRequest(BaseModel):
    """Agent licensing details"""

    dre_number: str = Field(..., max_length=16, description="State DRE license number")
    brokerage_name: str = Field(..., max_length=255)


@router.post(
    "/me",
    status_code=status.HTTP_200_OK,
    response_model=SignInAgentResponse,
)
async def sign_in_agent(
    caller: CallerIdentity = Depends(require_agent),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Agent Sign-In

    Returns the caller's agent account, creating it unapproved on first call.
    """
    use_case = SignInAgentUseCase(uow)
    result = await use_case.execute(caller)

    if result.is_err():
        raise ServerError(result.error)

    return result.value


@router.post(
    "/me/complete",
    status_code=status.HTTP_200_OK,
    response_model=AgentProfileResponse,
)
async def complete_agent_profile(
    request: CompleteProfileRequest,
    caller: CallerIdentity = Depends(require_agent),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Complete Agent Profile

    Raises:
        - 400 Bad Request: INVALID_DRE_NUMBER, INVALID_BROKERAGE_NAME
        - 404 Not Found: AGENT_NOT_FOUND
        - 409 Conflict: DRE_NUMBER_TAKEN
    """
    use_case = CompleteAgentProfileUseCase(uow)
    result = await use_case.execute(caller, request.dre_number, request.brokerage_name)

    if result.is_err():
        error = result.error
        if error.code in ("INVALID_DRE_NUMBER", "INVALID_BROKERAGE_NAME"):
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        elif error.code == "AGENT_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        elif error.code == "DRE_NUMBER_TAKEN":
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        else:
            raise ServerError(error)

    return result.value


@router.get(
    "/me/status",
    status_code=status.HTTP_200_OK,
    response_model=AgentStatusResponse,
)
async def get_agent_status(
    caller: CallerIdentity = Depends(require_agent),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Agent Approval Status

    Raises:
        - 404 Not Found: AGENT_NOT_FOUND
    """
    use_case = GetAgentStatusUseCase(uow)
    result = await use_case.execute(caller)

    if result.is_err():
        error = result.error
        if error.code == "AGENT_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value
