# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Static role catalog.

Every AppRole has exactly one RoleDefinition. The catalog is built once at
import time and is read-only afterwards; roles cannot be added or removed at
runtime. Permission lists are authored per role and are never inherited from
a lower level.
"""

from dataclasses import dataclass, field
from types import MappingProxyType

from src.models.enums import AppRole, DataScope


@dataclass(frozen=True)
class ResourcePermission:
    """Actions a role may perform on one resource."""

    resource: str
    actions: tuple[str, ...]


@dataclass(frozen=True)
class DataAccess:
    """Coarse record access flags and the restricted field denylist."""

    can_view_all: bool
    can_edit_all: bool
    can_delete_all: bool
    can_create_all: bool
    data_scope: DataScope
    restricted_fields: frozenset[str] = field(default_factory=frozenset)


@dataclass(frozen=True)
class SystemAccess:
    """System level capability flags."""

    can_manage_users: bool = False
    can_view_reports: bool = False
    can_export_data: bool = False
    can_import_data: bool = False
    can_manage_settings: bool = False
    can_view_audit_logs: bool = False


@dataclass(frozen=True)
class RoleDefinition:
    """Definition of a single role."""

    role: AppRole
    name: str
    description: str
    level: int  # Higher number = more privileges
    permissions: tuple[ResourcePermission, ...]
    visible_modules: tuple[str, ...]
    data_access: DataAccess
    system_access: SystemAccess

    def actions_for(self, resource: str) -> tuple[str, ...]:
        """Return the actions granted on a resource, empty when not listed."""
        for permission in self.permissions:
            if permission.resource == resource:
                return permission.actions
        return ()


def _permissions(**resources: tuple[str, ...]) -> tuple[ResourcePermission, ...]:
    return tuple(
        ResourcePermission(resource=resource, actions=actions)
        for resource, actions in resources.items()
    )


_CRUD = ("create", "read", "update", "delete")

_DEFINITIONS = (
    RoleDefinition(
        role=AppRole.ADMIN,
        name="System Administrator",
        description="Full system access with user management capabilities",
        level=100,
        permissions=_permissions(
            users=(*_CRUD, "manage_roles"),
            companies=_CRUD,
            invoices=(*_CRUD, "approve", "void"),
            expenses=(*_CRUD, "approve", "reject"),
            customers=_CRUD,
            vendors=_CRUD,
            fleet=(*_CRUD, "assign"),
            routes=(*_CRUD, "optimize"),
            maintenance=(*_CRUD, "schedule"),
            reports=("create", "read", "export", "schedule"),
            settings=_CRUD,
            audit_logs=("read", "export"),
        ),
        visible_modules=(
            "dashboard",
            "invoices",
            "expenses",
            "customers",
            "vendors",
            "fleet",
            "routes",
            "maintenance",
            "reports",
            "user_management",
            "settings",
            "audit_logs",
            "analytics",
            "system_health",
        ),
        data_access=DataAccess(
            can_view_all=True,
            can_edit_all=True,
            can_delete_all=True,
            can_create_all=True,
            data_scope=DataScope.ALL,
        ),
        system_access=SystemAccess(
            can_manage_users=True,
            can_view_reports=True,
            can_export_data=True,
            can_import_data=True,
            can_manage_settings=True,
            can_view_audit_logs=True,
        ),
    ),
    RoleDefinition(
        role=AppRole.GENERAL_MANAGER,
        name="General Manager",
        description="Strategic oversight with full operational access",
        level=80,
        permissions=_permissions(
            invoices=("create", "read", "update", "approve", "void"),
            expenses=("create", "read", "update", "approve", "reject"),
            customers=("create", "read", "update"),
            vendors=("create", "read", "update"),
            fleet=("create", "read", "update", "assign"),
            routes=("create", "read", "update", "optimize"),
            maintenance=("create", "read", "update", "schedule"),
            reports=("create", "read", "export", "schedule"),
            analytics=("read", "export"),
        ),
        visible_modules=(
            "dashboard",
            "invoices",
            "expenses",
            "customers",
            "vendors",
            "fleet",
            "routes",
            "maintenance",
            "reports",
            "analytics",
        ),
        data_access=DataAccess(
            can_view_all=True,
            can_edit_all=True,
            can_delete_all=False,
            can_create_all=True,
            data_scope=DataScope.ALL,
            restricted_fields=frozenset({"deleted_at", "internal_notes"}),
        ),
        system_access=SystemAccess(
            can_view_reports=True,
            can_export_data=True,
        ),
    ),
    RoleDefinition(
        role=AppRole.SUPERVISOR,
        name="Supervisor",
        description="Team management with operational oversight",
        level=60,
        permissions=_permissions(
            invoices=("create", "read", "update"),
            expenses=("create", "read", "update", "approve"),
            customers=("create", "read", "update"),
            vendors=("create", "read", "update"),
            fleet=("read", "update"),
            routes=("create", "read", "update"),
            maintenance=("create", "read", "update"),
            reports=("read", "export"),
        ),
        visible_modules=(
            "dashboard",
            "invoices",
            "expenses",
            "customers",
            "vendors",
            "fleet",
            "routes",
            "maintenance",
            "reports",
        ),
        data_access=DataAccess(
            can_view_all=False,
            can_edit_all=False,
            can_delete_all=False,
            can_create_all=True,
            data_scope=DataScope.DEPARTMENT,
            restricted_fields=frozenset(
                {"deleted_at", "internal_notes", "cost_center", "profit_margin"}
            ),
        ),
        system_access=SystemAccess(
            can_view_reports=True,
            can_export_data=True,
        ),
    ),
    RoleDefinition(
        role=AppRole.DATA_ENTRY,
        name="Data Entry",
        description="Basic data entry with limited access",
        level=20,
        permissions=_permissions(
            invoices=("create", "read"),
            expenses=("create", "read"),
            customers=("create", "read"),
            vendors=("create", "read"),
            fleet=("read",),
            routes=("read",),
            maintenance=("create", "read"),
        ),
        visible_modules=(
            "dashboard",
            "invoices",
            "expenses",
            "customers",
            "vendors",
            "fleet",
            "routes",
            "maintenance",
        ),
        data_access=DataAccess(
            can_view_all=False,
            can_edit_all=False,
            can_delete_all=False,
            can_create_all=False,
            data_scope=DataScope.ASSIGNED,
            restricted_fields=frozenset(
                {
                    "deleted_at",
                    "internal_notes",
                    "cost_center",
                    "profit_margin",
                    "salary_info",
                    "performance_metrics",
                    "confidential_data",
                }
            ),
        ),
        system_access=SystemAccess(),
    ),
)

ROLES: MappingProxyType[AppRole, RoleDefinition] = MappingProxyType(
    {definition.role: definition for definition in _DEFINITIONS}
)
