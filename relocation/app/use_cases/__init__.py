"""
Use Cases

Organized by domain folder:
- invitations/: Invitation lifecycle and client assignment
- agents/: Agent accounts
- clients/: Client records
- admin/: Agent approval and dashboard
- notifications/: In-app notifications
"""

from .admin import (
    ApproveAgentUseCase,
    GetDashboardStatsUseCase,
    ListAgentsUseCase,
    RejectAgentUseCase,
)
from .agents import (
    CompleteAgentProfileUseCase,
    GetAgentStatusUseCase,
    SignInAgentUseCase,
)
from .clients import RegisterClientUseCase
from .invitations import (
    CreateInvitationUseCase,
    ListInvitationsUseCase,
    RedeemInvitationUseCase,
    VerifyInvitationUseCase,
)
from .notifications import (
    ListNotificationsUseCase,
    MarkNotificationsReadUseCase,
)

__all__ = [
    # Invitations
    "CreateInvitationUseCase",
    "ListInvitationsUseCase",
    "VerifyInvitationUseCase",
    "RedeemInvitationUseCase",
    # Agents
    "SignInAgentUseCase",
    "CompleteAgentProfileUseCase",
    "GetAgentStatusUseCase",
    # Clients
    "RegisterClientUseCase",
    # Admin
    "ApproveAgentUseCase",
    "RejectAgentUseCase",
    "ListAgentsUseCase",
    "GetDashboardStatsUseCase",
    # Notifications
    "ListNotificationsUseCase",
    "MarkNotificationsReadUseCase",
]
