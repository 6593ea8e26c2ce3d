"""
Client Use Case DTOs (Data Transfer Objects)
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel

from relocation.app.use_cases.invitations.dtos import AgentSummary, ClientSummary
from relocation.domain.entities import Client


class RegisterClientResponse(BaseModel):
    """Response for register client use case"""

    client: ClientSummary
    created: bool
    agent: Optional[AgentSummary] = None


class ClientRecord(BaseModel):
    """A client as listed to its agent or an administrator"""

    id: UUID
    name: str
    email: str
    owning_agent_id: Optional[UUID] = None
    invitation_token: Optional[str] = None
    created_at: datetime

    @classmethod
    def from_client(cls, client: Client) -> "ClientRecord":
        return cls(
            id=client.id,
            name=client.name,
            email=client.email,
            owning_agent_id=client.owning_agent_id,
            invitation_token=client.invitation_token,
            created_at=client.created_at,
        )


class ListAgentClientsResponse(BaseModel):
    """Response for list agent clients use case"""

    clients: List[ClientRecord]
