"""
Invitation Policy

Pure rules for invitation codes and invitation state. No I/O.
"""

from datetime import datetime
from typing import Optional

from .entities import Invitation, InvitationCheck

CODE_ALPHABET = "ABCDEFGHJKLMNPQRSTUVWXYZ23456789"  # no 0, O, I, 1
CODE_LENGTH = 6

MIN_VALIDITY_DAYS = 1
MAX_VALIDITY_DAYS = 90
DEFAULT_VALIDITY_DAYS = 30


def canonicalize_code(code: str) -> str:
    return code.strip().upper()


def is_well_formed_code(code: str) -> bool:
    # Lookups accept any alphanumerics; only generation is bound to CODE_ALPHABET.
    canonical = canonicalize_code(code)
    return (
        len(canonical) == CODE_LENGTH and canonical.isascii() and canonical.isalnum()
    )


def classify(invitation: Optional[Invitation], now: datetime) -> InvitationCheck:
    """
    Classify an invitation at ``now``.

    A used invitation is always ``already_used``, even once it is past
    ``expires_at``: consumption is permanent and the more specific state.
    """
    if invitation is None:
        return InvitationCheck.not_found
    if invitation.used_at is not None:
        return InvitationCheck.already_used
    if now > invitation.expires_at:
        return InvitationCheck.expired
    return InvitationCheck.valid
