from datetime import UTC, datetime, timedelta
from typing import Optional

from jose import JWTError, jwt

from config import ApplicationConfig


def create_access_token(
    identity_reference: str,
    role: str,
    expires_delta: timedelta = timedelta(minutes=15),
    email: Optional[str] = None,
    name: Optional[str] = None,
) -> str:
    """
    Create JWT access token with custom expiry

    Tokens normally come from the identity provider; this mirrors its claims
    for local development and tests.

    Args:
        identity_reference: Identity provider user id, stored as "sub"
        role: Caller role (agent, client)
        expires_delta: Token expiration duration
        email: Optional email claim
        name: Optional display name claim

    Returns:
        JWT token string
    """
    now = datetime.now(UTC)
    payload = {
        "sub": identity_reference,
        "role": role,
        "exp": now + expires_delta,
        "iat": now,
    }
    if email:
        payload["email"] = email
    if name:
        payload["name"] = name
    return jwt.encode(
        payload, ApplicationConfig.JWT_SECRET, algorithm=ApplicationConfig.JWT_ALGORITHM
    )


def verify_jwt(token: str) -> Optional[dict]:
    """
    Verify and decode JWT token

    Args:
        token: JWT token string

    Returns:
        Decoded payload dict or None if invalid
    """
    try:
        payload = jwt.decode(
            token,
            ApplicationConfig.JWT_SECRET,
            algorithms=[ApplicationConfig.JWT_ALGORITHM],
        )
        return payload
    except JWTError:
        return None
