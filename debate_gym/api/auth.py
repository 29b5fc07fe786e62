"""Request authentication against Supabase auth."""

from __future__ import annotations

from dataclasses import dataclass

from fastapi import Depends, Header

from debate_gym.api.errors import ApiError
from debate_gym.db.client import SupabaseClient, get_supabase_client


@dataclass
class AuthUser:
    id: str
    email: str | None = None


def _bearer_token(authorization: str | None) -> str | None:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


async def get_current_user(
    authorization: str | None = Header(default=None),
    db: SupabaseClient = Depends(get_supabase_client),
) -> AuthUser:
    """Resolve the bearer token to a user, or reject the request with 401."""
    token = _bearer_token(authorization)
    if token is None:
        raise ApiError(401, "Unauthorized")
    user = db.get_user(token)
    if user is None:
        raise ApiError(401, "Unauthorized")
    return AuthUser(id=str(user.id), email=getattr(user, "email", None))
