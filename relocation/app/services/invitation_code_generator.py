"""
Invitation Code Generator

Produces short, human-typeable invitation codes that no existing invitation uses.
"""

import secrets

from relocation.app.repositories.invitation_repository import IInvitationRepository
from relocation.domain.invitation_policy import CODE_ALPHABET, CODE_LENGTH

DEFAULT_MAX_ATTEMPTS = 10


class CodeGenerationExhausted(Exception):
    """Every attempt produced a code that is already taken"""

    def __init__(self, attempts: int):
        self.attempts = attempts
        super().__init__(f"No unique invitation code after {attempts} attempts")


def random_code() -> str:
    return "".join(secrets.choice(CODE_ALPHABET) for _ in range(CODE_LENGTH))


class InvitationCodeGenerator:
    """
    Generates a code and checks the store before returning it.

    Gives up with CodeGenerationExhausted after ``max_attempts`` collisions.
    Only reads from the store.
    """

    def __init__(
        self,
        invitations: IInvitationRepository,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        code_factory=random_code,
    ):
        self.invitations = invitations
        self.max_attempts = max_attempts
        self.code_factory = code_factory

    async def generate(self) -> str:
        for _ in range(self.max_attempts):
            code = self.code_factory()
            if not await self.invitations.code_exists(code):
                return code
        raise CodeGenerationExhausted(self.max_attempts)
