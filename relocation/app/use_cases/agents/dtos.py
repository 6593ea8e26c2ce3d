"""
Agent Use Case DTOs (Data Transfer Objects)
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from relocation.domain.entities import Agent


class AgentProfileResponse(BaseModel):
    """Agent account as seen by the agent or an administrator"""

    id: UUID
    name: str
    email: str
    is_approved: bool
    approved_at: Optional[datetime] = None
    dre_number: Optional[str] = None
    brokerage_name: Optional[str] = None
    created_at: datetime

    @classmethod
    def from_agent(cls, agent: Agent) -> "AgentProfileResponse":
        return cls(
            id=agent.id,
            name=agent.name,
            email=agent.email,
            is_approved=agent.is_approved,
            approved_at=agent.approved_at,
            dre_number=agent.dre_number,
            brokerage_name=agent.brokerage_name,
            created_at=agent.created_at,
        )


class SignInAgentResponse(BaseModel):
    """Response for agent sign-in use case"""

    agent: AgentProfileResponse
    created: bool


class AgentStatusResponse(BaseModel):
    """Response for agent status use case"""

    is_approved: bool
    dre_number: Optional[str] = None
    brokerage_name: Optional[str] = None
    approved_at: Optional[datetime] = None
