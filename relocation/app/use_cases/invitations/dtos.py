"""
Invitation Use Case DTOs (Data Transfer Objects)

All Response classes for the invitation domain.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel


# ============================================================================
# Summaries
# ============================================================================


class AgentSummary(BaseModel):
    """Public profile of an agent"""

    id: UUID
    name: str
    email: str


class ClientSummary(BaseModel):
    """Client record as returned after assignment"""

    id: UUID
    name: str
    email: str
    owning_agent_id: Optional[UUID] = None
    invitation_token: Optional[str] = None


# ============================================================================
# Response DTOs
# ============================================================================


class InvitationResponse(BaseModel):
    """An invitation as seen by the agent who created it"""

    id: UUID
    code: str
    token: str
    link: str
    code_link: str
    email: Optional[str] = None
    expires_at: datetime
    created_at: datetime
    used_at: Optional[datetime] = None
    is_expired: bool
    is_used: bool


class ListInvitationsResponse(BaseModel):
    """Response for list invitations use case"""

    invitations: List[InvitationResponse]


class InvitationPreview(BaseModel):
    """Invitation details shown on the sign-up page"""

    id: UUID
    agent_id: UUID
    agent_name: Optional[str] = None
    agent_email: Optional[str] = None
    agent_approved: bool
    email: Optional[str] = None
    token: Optional[str] = None
    expires_at: datetime
    created_at: datetime
    used_at: Optional[datetime] = None


class VerifyInvitationResponse(BaseModel):
    """Response for verify invitation use case"""

    valid: bool
    reason: Optional[str] = None
    invitation: InvitationPreview


class RedeemInvitationResponse(BaseModel):
    """Response for redeem invitation use case"""

    client: ClientSummary
    agent: AgentSummary
