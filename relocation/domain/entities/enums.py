"""
Relocation Service Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class CallerRole(str, Enum):
    """Role claim carried by the identity provider token"""

    agent = "agent"
    client = "client"


class InvitationCheck(str, Enum):
    """Outcome of classifying an invitation at a point in time"""

    not_found = "not_found"
    already_used = "already_used"
    expired = "expired"
    valid = "valid"


class NotificationType(str, Enum):
    """Kinds of notifications delivered to users"""

    agent_approved = "agent_approved"
    agent_rejected = "agent_rejected"
