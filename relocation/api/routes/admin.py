from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field

from config import ApplicationConfig
from relocation.api.error import ClientError, ServerError
from relocation.api.utils.admin_auth import verify_admin_api_key
from relocation.app.services.unit_of_work import UnitOfWork
from relocation.app.use_cases.admin import (
    AdminClientResponse,
    AgentDetailResponse,
    ApproveAgentResponse,
    ApproveAgentUseCase,
    DashboardStatsResponse,
    GetAgentUseCase,
    GetClientUseCase,
    GetDashboardStatsUseCase,
    ListAgentsResponse,
    ListAgentsUseCase,
    ListClientsResponse,
    ListClientsUseCase,
    RejectAgentResponse,
    RejectAgentUseCase,
)
from relocation.depends import get_unit_of_work

router = APIRouter(
    prefix="/admin",
    tags=["Admin"],
    dependencies=[Depends(verify_admin_api_key)],
)


class ApproveAgentRequest(BaseModel):
    approved_by: Optional[str] = Field(None, max_length=255)


class RejectAgentRequest(BaseModel):
    reason: Optional[str] = Field(None, max_length=1000)


def raise_agent_error(error):
    if error.code == "AGENT_NOT_FOUND":
        raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
    elif error.code == "AGENT_ALREADY_APPROVED":
        raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
    raise ServerError(error)


@router.get(
    "/agents",
    status_code=status.HTTP_200_OK,
    response_model=ListAgentsResponse,
)
async def list_agents(
    approved: Optional[bool] = Query(None, description="Filter by approval state"),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List Agents (Admin Only)

    Requires: X-Admin-API-Key header
    """
    use_case = ListAgentsUseCase(uow)
    result = await use_case.execute(approved)

    if result.is_err():
        raise ServerError(result.error)

    return result.value


@router.get(
    "/agents/{agent_id}",
    status_code=status.HTTP_200_OK,
    response_model=AgentDetailResponse,
)
async def get_agent(agent_id: UUID, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Agent Detail (Admin Only)

    Profile, number of assigned clients and the five most recent of them.

    Requires: X-Admin-API-Key header

    Raises:
        - 401 Unauthorized: Missing or invalid API key
        - 404 Not Found: AGENT_NOT_FOUND
    """
    use_case = GetAgentUseCase(uow)
    result = await use_case.execute(agent_id)

    if result.is_err():
        raise_agent_error(result.error)

    return result.value


@router.post(
    "/agents/{agent_id}/approve",
    status_code=status.HTTP_200_OK,
    response_model=ApproveAgentResponse,
)
async def approve_agent(
    agent_id: UUID,
    request: Optional[ApproveAgentRequest] = None,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Approve Agent (Admin Only)

    Marks the agent approved so their invitations become redeemable, and
    notifies the agent.

    Requires: X-Admin-API-Key header

    Raises:
        - 401 Unauthorized: Missing or invalid API key
        - 404 Not Found: AGENT_NOT_FOUND
        - 409 Conflict: AGENT_ALREADY_APPROVED
    """
    approved_by = (request.approved_by if request else None) or "admin"

    use_case = ApproveAgentUseCase(uow)
    result = await use_case.execute(agent_id, approved_by)

    if result.is_err():
        raise_agent_error(result.error)

    return result.value


@router.post(
    "/agents/{agent_id}/reject",
    status_code=status.HTTP_200_OK,
    response_model=RejectAgentResponse,
)
async def reject_agent(
    agent_id: UUID,
    request: Optional[RejectAgentRequest] = None,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Reject Agent (Admin Only)

    Notifies the agent of the rejection. The account stays unapproved.

    Requires: X-Admin-API-Key header

    Raises:
        - 401 Unauthorized: Missing or invalid API key
        - 404 Not Found: AGENT_NOT_FOUND
        - 409 Conflict: AGENT_ALREADY_APPROVED
    """
    use_case = RejectAgentUseCase(uow)
    result = await use_case.execute(agent_id, request.reason if request else None)

    if result.is_err():
        raise_agent_error(result.error)

    return result.value


@router.get(
    "/dashboard/stats",
    status_code=status.HTTP_200_OK,
    response_model=DashboardStatsResponse,
)
async def get_dashboard_stats(uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Dashboard Statistics (Admin Only)

    Requires: X-Admin-API-Key header
    """
    use_case = GetDashboardStatsUseCase(
        uow, recent_days=ApplicationConfig.RECENT_ACTIVITY_DAYS
    )
    result = await use_case.execute()

    if result.is_err():
        raise ServerError(result.error)

    return result.value


@router.get(
    "/clients",
    status_code=status.HTTP_200_OK,
    response_model=ListClientsResponse,
)
async def list_clients(
    agent_id: Optional[UUID] = Query(None, description="Only this agent's clients"),
    search: Optional[str] = Query(None, max_length=255, description="Name or email contains"),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List Clients (Admin Only)

    All clients, newest first, each with its owning agent's name and email.

    Requires: X-Admin-API-Key header
    """
    use_case = ListClientsUseCase(uow)
    result = await use_case.execute(agent_id=agent_id, search=search)

    if result.is_err():
        raise ServerError(result.error)

    return result.value


@router.get(
    "/clients/{client_id}",
    status_code=status.HTTP_200_OK,
    response_model=AdminClientResponse,
)
async def get_client(client_id: UUID, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Client Detail (Admin Only)

    Requires: X-Admin-API-Key header

    Raises:
        - 401 Unauthorized: Missing or invalid API key
        - 404 Not Found: CLIENT_NOT_FOUND
    """
    use_case = GetClientUseCase(uow)
    result = await use_case.execute(client_id)

    if result.is_err():
        error = result.error
        if error.code == "CLIENT_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value
