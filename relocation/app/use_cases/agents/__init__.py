"""
Agent Account Use Cases
"""

from .complete_agent_profile_use_case import CompleteAgentProfileUseCase
from .dtos import AgentProfileResponse, AgentStatusResponse, SignInAgentResponse
from .get_agent_status_use_case import GetAgentStatusUseCase
from .sign_in_agent_use_case import SignInAgentUseCase

__all__ = [
    "SignInAgentUseCase",
    "CompleteAgentProfileUseCase",
    "GetAgentStatusUseCase",
    "AgentProfileResponse",
    "AgentStatusResponse",
    "SignInAgentResponse",
]
