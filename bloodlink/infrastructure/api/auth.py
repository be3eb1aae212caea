"""Request identity — set by the upstream authentication layer.

Tokens are verified before requests reach this service; the gateway forwards
the authenticated user as ``X-User-Id`` / ``X-User-Role`` headers.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from fastapi import Depends, Header, HTTPException

from bloodlink.domain.value_objects.enums import Role


@dataclass(frozen=True)
class Identity:
    user_id: int
    role: Role


async def get_current_identity(
    x_user_id: str | None = Header(default=None),
    x_user_role: str | None = Header(default=None),
) -> Identity:
    if not x_user_id or not x_user_role:
        raise HTTPException(status_code=401, detail="Authentication required")
    try:
        return Identity(user_id=int(x_user_id), role=Role(x_user_role.lower()))
    except ValueError:
        raise HTTPException(status_code=401, detail="Invalid identity")


def require_role(role: Role) -> Callable[..., Identity]:
    """Dependency factory: reject callers whose role differs from ``role``."""

    async def dependency(identity: Identity = Depends(get_current_identity)) -> Identity:
        if identity.role != role:
            raise HTTPException(status_code=403, detail="Access denied")
        return identity

    return dependency
