"""
Client Entity

A person being relocated.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from ..base import utc_now


class Client(SQLModel, table=True):
    """
    Client entity - a person being relocated.

    Business Rules:
    - owning_agent_id is None until an invitation is redeemed
    - Assignment happens once; owning_agent_id is never overwritten
    - invitation_token keeps the token of the redeemed invitation for reference
    """

    __tablename__ = "clients"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    identity_reference: str = Field(unique=True, index=True, max_length=255)

    name: str = Field(default="Unknown", max_length=255)
    email: str = Field(default="", max_length=255)

    owning_agent_id: Optional[UUID] = Field(
        default=None, foreign_key="agents.id", index=True
    )
    invitation_token: Optional[str] = Field(default=None, max_length=36)

    # Timestamps
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_client_created_at", "created_at"),)
