"""
Invitation Use Cases

Invitation lifecycle: creation, listing, preview and redemption.
"""

from .create_invitation_use_case import CreateInvitationUseCase
from .dtos import (
    AgentSummary,
    ClientSummary,
    InvitationPreview,
    InvitationResponse,
    ListInvitationsResponse,
    RedeemInvitationResponse,
    VerifyInvitationResponse,
)
from .list_invitations_use_case import ListInvitationsUseCase
from .redeem_invitation_use_case import RedeemInvitationUseCase
from .verify_invitation_use_case import VerifyInvitationUseCase

__all__ = [
    "CreateInvitationUseCase",
    "ListInvitationsUseCase",
    "VerifyInvitationUseCase",
    "RedeemInvitationUseCase",
    "AgentSummary",
    "ClientSummary",
    "InvitationPreview",
    "InvitationResponse",
    "ListInvitationsResponse",
    "RedeemInvitationResponse",
    "VerifyInvitationResponse",
]
