"""
Invitation Entity

One-time offer from an agent to a prospective client.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from ..base import generate_uuid, utc_now


class Invitation(SQLModel, table=True):
    """
    Invitation entity - single-use code/token pair created by an agent.

    Business Rules:
    - code is 6 characters, uppercase, unique across all invitations
    - token is a UUID for link-based sign-up, unique
    - expires_at = created_at + validity window (1-90 days, default 30)
    - used_at is set once on redemption and never cleared
    - target_email is informational only and never enforced
    """

    __tablename__ = "client_invitations"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    code: str = Field(unique=True, index=True, max_length=6)
    token: str = Field(default_factory=generate_uuid, unique=True, index=True, max_length=36)

    owning_agent_id: UUID = Field(foreign_key="agents.id", nullable=False, index=True)
    target_email: Optional[str] = Field(default=None, max_length=255)

    # Timestamps
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
    expires_at: datetime = Field(sa_column=Column(DateTime, nullable=False))
    used_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_invitation_expires_at", "expires_at"),
        Index("idx_invitation_agent_created", "owning_agent_id", "created_at"),
    )
