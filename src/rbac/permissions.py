# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Resource vocabulary and the per-resource action and field tables."""

from dataclasses import dataclass
from types import MappingProxyType

from src.models.enums import AppRole

# Business entity categories a permission can target
RESOURCES = (
    "users",
    "companies",
    "invoices",
    "expenses",
    "customers",
    "vendors",
    "fleet",
    "routes",
    "maintenance",
    "reports",
    "settings",
    "audit_logs",
    "analytics",
)

# Named UI sections a role may be allowed to see
MODULES = (
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
)

# Columns of the "current permissions" matrix shown to users
MATRIX_RESOURCES = ("invoices", "expenses", "customers", "vendors", "fleet")
MATRIX_ACTIONS = ("create", "read", "update", "delete", "export")

# Allowlist sentinel meaning every field of the resource
ALL_FIELDS = "*"


@dataclass(frozen=True)
class Permission:
    """A single (resource, action) pair."""

    resource: str
    action: str

    @classmethod
    def parse(cls, code: str) -> "Permission | None":
        """Build a permission from a ``resource.action`` code.

        Returns None when the code has no separator or an empty part.
        """
        resource, sep, action = code.partition(".")
        if not sep or not resource or not action:
            return None
        return cls(resource=resource, action=action)

    @property
    def code(self) -> str:
        return f"{self.resource}.{self.action}"


def _freeze(table: dict) -> MappingProxyType:
    return MappingProxyType(
        {
            role: MappingProxyType({key: tuple(values) for key, values in entries.items()})
            for role, entries in table.items()
        }
    )


# Module-specific action lists. These are authored independently of the role
# permission lists and may grant actions (e.g. export) the latter do not.
MODULE_ACTIONS = MappingProxyType(
    {
        "invoices": MappingProxyType(
            {
                AppRole.ADMIN: ("create", "read", "update", "delete", "approve", "void", "export"),
                AppRole.GENERAL_MANAGER: ("create", "read", "update", "approve", "void", "export"),
                AppRole.SUPERVISOR: ("create", "read", "update", "export"),
                AppRole.DATA_ENTRY: ("create", "read"),
            }
        ),
        "expenses": MappingProxyType(
            {
                AppRole.ADMIN: ("create", "read", "update", "delete", "approve", "reject", "export"),
                AppRole.GENERAL_MANAGER: ("create", "read", "update", "approve", "reject", "export"),
                AppRole.SUPERVISOR: ("create", "read", "update", "approve", "export"),
                AppRole.DATA_ENTRY: ("create", "read"),
            }
        ),
        "user_management": MappingProxyType(
            {
                AppRole.ADMIN: ("create", "read", "update", "delete", "assign_roles", "view_audit"),
                AppRole.GENERAL_MANAGER: ("read",),
                AppRole.SUPERVISOR: ("read",),
                AppRole.DATA_ENTRY: (),
            }
        ),
    }
)

# Field allowlists per role and resource, consulted separately from the
# restricted field denylist carried by each role definition.
FIELD_PERMISSIONS = _freeze(
    {
        AppRole.ADMIN: {
            "invoices": [ALL_FIELDS],
            "expenses": [ALL_FIELDS],
            "customers": [ALL_FIELDS],
            "vendors": [ALL_FIELDS],
            "fleet": [ALL_FIELDS],
            "users": [ALL_FIELDS],
        },
        AppRole.GENERAL_MANAGER: {
            "invoices": [ALL_FIELDS],
            "expenses": [ALL_FIELDS],
            "customers": [ALL_FIELDS],
            "vendors": [ALL_FIELDS],
            "fleet": [ALL_FIELDS],
            "users": ["id", "username", "email", "role", "status"],
        },
        AppRole.SUPERVISOR: {
            "invoices": ["id", "customer", "amount", "status", "created_at", "due_date"],
            "expenses": ["id", "vendor", "amount", "category", "status", "created_at"],
            "customers": ["id", "name", "email", "phone", "status"],
            "vendors": ["id", "name", "email", "phone", "status"],
            "fleet": ["id", "plate_number", "type", "status", "assigned_driver"],
            "users": ["id", "username", "email", "role"],
        },
        AppRole.DATA_ENTRY: {
            "invoices": ["id", "customer", "amount", "status"],
            "expenses": ["id", "vendor", "amount", "category"],
            "customers": ["id", "name", "email", "phone"],
            "vendors": ["id", "name", "email", "phone"],
            "fleet": ["id", "plate_number", "type"],
            "users": ["id", "username", "email"],
        },
    }
)
