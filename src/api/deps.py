# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""API dependencies for dependency injection."""

import logging
from dataclasses import dataclass, field

from fastapi import Depends, HTTPException, Request, status

from src.config import Settings, get_settings
from src.models.enums import AppRole
from src.rbac.permissions import Permission
from src.services import rbac_service

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Identity:
    """Caller identity as forwarded by the identity provider."""

    user_id: str
    roles: tuple[AppRole, ...] = ()
    rejected_roles: tuple[str, ...] = field(default=())

    @property
    def primary_role(self) -> AppRole | None:
        return rbac_service.resolve_primary_role(self.roles)


def _split_roles(raw: str | None) -> list[str]:
    if not raw:
        return []
    return [value.strip() for value in raw.split(",") if value.strip()]


def get_current_identity(
    request: Request,
    settings: Settings = Depends(get_settings),
) -> Identity:
    """Get the calling user from the identity headers."""
    user_id = request.headers.get(settings.user_id_header)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )

    known, rejected = rbac_service.parse_roles(
        _split_roles(request.headers.get(settings.roles_header))
    )
    return Identity(user_id=user_id, roles=tuple(known), rejected_roles=tuple(rejected))


def require_module(module: str):
    """Dependency requiring that any held role may see a module."""

    def dependency(
        request: Request,
        identity: Identity = Depends(get_current_identity),
    ) -> Identity:
        if not rbac_service.can_any_role_access_module(identity.roles, module):
            logger.warning(
                f"Module access denied: user={identity.user_id} "
                f"module={module} path={request.url.path}"
            )
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Module not available: {module}",
            )
        return identity

    return dependency


def require_permission(permission_code: str):
    """Dependency requiring that any held role grants a ``resource.action`` code."""
    permission = Permission.parse(permission_code)
    if permission is None:
        raise ValueError(f"Invalid permission code: {permission_code}")

    def dependency(
        request: Request,
        identity: Identity = Depends(get_current_identity),
    ) -> Identity:
        if not any(
            rbac_service.has_permission(role, permission.resource, permission.action)
            for role in identity.roles
        ):
            logger.warning(
                f"Permission denied: user={identity.user_id} "
                f"permission={permission.code} path={request.url.path}"
            )
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Permission denied: {permission.code}",
            )
        return identity

    return dependency
