"""
Relocation Service Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    CallerRole,
    InvitationCheck,
    NotificationType,
)

# Export all entities
from .agent import Agent
from .client import Client
from .invitation import Invitation
from .notification import Notification
from .audit_event import AuditEvent

__all__ = [
    # Enums
    "CallerRole",
    "InvitationCheck",
    "NotificationType",
    # Entities
    "Agent",
    "Client",
    "Invitation",
    "Notification",
    "AuditEvent",
]
