"""
Invitation and assignment errors

Closed set of expected failures. Each code has one message; expiry and
prior use are always reported separately.
"""

from relocation.domain.entities import InvitationCheck
from relocation.libs.result import Error

CLIENT_NOT_FOUND = Error("CLIENT_NOT_FOUND", "Client record not found")
ALREADY_ASSIGNED = Error(
    "ALREADY_ASSIGNED", "An agent is already assigned to this client"
)
INVITATION_NOT_FOUND = Error("INVITATION_NOT_FOUND", "Invalid invitation code")
INVITATION_EXPIRED = Error(
    "INVITATION_EXPIRED",
    "This invitation has expired. Ask your agent for a new code",
)
INVITATION_ALREADY_USED = Error(
    "INVITATION_ALREADY_USED", "This invitation has already been used"
)
AGENT_NOT_APPROVED = Error(
    "AGENT_NOT_APPROVED",
    "This invitation was issued by an agent who has not been approved yet",
)
CODE_GENERATION_EXHAUSTED = Error(
    "CODE_GENERATION_EXHAUSTED", "Could not generate a unique invitation code"
)
INVALID_VALIDITY_DAYS = Error(
    "INVALID_VALIDITY_DAYS", "expires_in_days must be between 1 and 90"
)
INVALID_CODE_FORMAT = Error(
    "INVALID_CODE_FORMAT", "Invitation code must be 6 letters or digits"
)

CHECK_ERRORS = {
    InvitationCheck.not_found: INVITATION_NOT_FOUND,
    InvitationCheck.expired: INVITATION_EXPIRED,
    InvitationCheck.already_used: INVITATION_ALREADY_USED,
}
