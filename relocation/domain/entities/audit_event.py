"""
AuditEvent Entity

Immutable log of invitation and approval events.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import JSON, Column, DateTime, Field, Index, SQLModel

from ..base import utc_now


class AuditEvent(SQLModel, table=True):
    """
    AuditEvent entity - immutable log of invitation and approval events.

    Business Rules:
    - Immutable (never updated or deleted)
    - actor_identity is None for administrator actions made with the API key
    - Metadata stores ids and values relevant to the action
    """

    __tablename__ = "audit_events"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    actor_identity: Optional[str] = Field(default=None, index=True, max_length=255)
    action: str = Field(max_length=100)  # e.g., "invitation_redeemed"
    event_metadata: Optional[dict] = Field(default=None, sa_column=Column(JSON))

    # Timestamps
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_audit_created_at", "created_at"),
        Index("idx_audit_action", "action"),
    )
