"""
Caller Identity

The authenticated caller, resolved once at the API boundary and passed
explicitly into use cases.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict

from .entities.enums import CallerRole


class CallerIdentity(BaseModel):
    """Who is calling, as asserted by the identity provider token"""

    model_config = ConfigDict(frozen=True)

    identity_reference: str
    role: CallerRole
    email: Optional[str] = None
    name: Optional[str] = None

    @property
    def display_name(self) -> str:
        return self.name or "Unknown"
