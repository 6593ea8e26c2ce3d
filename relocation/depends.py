from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from relocation.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from relocation.api.utils.jwt import verify_jwt
from relocation.domain.entities import CallerRole
from relocation.domain.identity import CallerIdentity

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer()


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


async def get_current_caller(
    credentials: HTTPAuthorizationCredentials = Depends(security),
) -> CallerIdentity:
    """
    Dependency to resolve the caller from the Authorization header.

    Args:
        credentials: Bearer token issued by the identity provider

    Returns:
        CallerIdentity built from the "sub", "role", "email" and "name" claims

    Raises:
        HTTPException: 401 if token is invalid, expired or lacks required claims
    """
    payload = verify_jwt(credentials.credentials)

    if payload is None or not payload.get("sub"):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )

    try:
        role = CallerRole(payload.get("role"))
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token has no valid role",
        )

    return CallerIdentity(
        identity_reference=payload["sub"],
        role=role,
        email=payload.get("email"),
        name=payload.get("name"),
    )


def require_role(role: CallerRole):
    async def dependency(
        caller: CallerIdentity = Depends(get_current_caller),
    ) -> CallerIdentity:
        if caller.role != role:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Only {role.value}s can perform this action",
            )
        return caller

    return dependency


require_agent = require_role(CallerRole.agent)
require_client = require_role(CallerRole.client)
