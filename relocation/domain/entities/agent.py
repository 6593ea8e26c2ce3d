"""
Agent Entity

A relocation-service provider account.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from ..base import utc_now


class Agent(SQLModel, table=True):
    """
    Agent entity - relocation consultant account.

    Business Rules:
    - Created on first sign-in, linked to the identity provider by identity_reference
    - is_approved goes from False to True exactly once, by an administrator
    - Approval never reverts automatically
    - Invitations of unapproved agents cannot be redeemed
    - dre_number is unique across agents
    """

    __tablename__ = "agents"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    identity_reference: str = Field(unique=True, index=True, max_length=255)

    name: str = Field(default="Unknown", max_length=255)
    email: str = Field(default="", max_length=255)

    # Approval workflow
    is_approved: bool = Field(default=False)
    approved_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    approved_by: Optional[str] = Field(default=None, max_length=255)

    # Licensing profile, completed after sign-up
    dre_number: Optional[str] = Field(default=None, unique=True, max_length=8)
    brokerage_name: Optional[str] = Field(default=None, max_length=255)

    # Timestamps
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_agent_is_approved", "is_approved"),)
