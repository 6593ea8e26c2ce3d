"""
Admin Use Case DTOs (Data Transfer Objects)
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel

from relocation.app.use_cases.agents.dtos import AgentProfileResponse
from relocation.app.use_cases.clients.dtos import ClientRecord
from relocation.app.use_cases.invitations.dtos import AgentSummary


class ListAgentsResponse(BaseModel):
    """Response for list agents use case"""

    agents: List[AgentProfileResponse]


class ApproveAgentResponse(BaseModel):
    """Response for approve agent use case"""

    agent: AgentProfileResponse


class RejectAgentResponse(BaseModel):
    """Response for reject agent use case"""

    status: str


class RecentClient(BaseModel):
    id: UUID
    name: str
    created_at: datetime


class RecentAgent(BaseModel):
    id: UUID
    name: str
    email: str
    created_at: datetime


class DashboardStatsResponse(BaseModel):
    """Response for dashboard stats use case"""

    total_clients: int
    assigned_clients: int
    unassigned_clients: int
    total_agents: int
    pending_agents: int
    active_invitations: int
    recent_clients: List[RecentClient]
    recent_agents: List[RecentAgent]


class AdminClientResponse(ClientRecord):
    """A client with its owning agent, as seen by an administrator"""

    agent: Optional[AgentSummary] = None


class ListClientsResponse(BaseModel):
    """Response for list clients use case"""

    clients: List[AdminClientResponse]


class AgentDetailResponse(BaseModel):
    """Response for get agent use case"""

    agent: AgentProfileResponse
    client_count: int
    recent_clients: List[ClientRecord]
