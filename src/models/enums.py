# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Enumeration types for the access model."""

from enum import Enum


class AppRole(str, Enum):
    """Roles an identity provider may assign to a user."""

    ADMIN = "admin"
    GENERAL_MANAGER = "general_manager"
    SUPERVISOR = "supervisor"
    DATA_ENTRY = "data_entry"


class DataScope(str, Enum):
    """Breadth of records a role may act on.

    Ordered from widest to narrowest:
        ALL → DEPARTMENT → ASSIGNED → OWN
    """

    ALL = "all"
    DEPARTMENT = "department"
    ASSIGNED = "assigned"
    OWN = "own"


class RecordAction(str, Enum):
    """Coarse record actions backed by the role's data access flags."""

    VIEW = "view"
    EDIT = "edit"
    DELETE = "delete"
    CREATE = "create"


class SystemCapability(str, Enum):
    """System level capabilities granted per role."""

    MANAGE_USERS = "manage_users"
    VIEW_REPORTS = "view_reports"
    EXPORT_DATA = "export_data"
    IMPORT_DATA = "import_data"
    MANAGE_SETTINGS = "manage_settings"
    VIEW_AUDIT_LOGS = "view_audit_logs"


class GateOutcome(str, Enum):
    """Result of evaluating an access gate."""

    ALLOW = "allow"
    DENY_ROLE = "deny_role"  # Required role not held
    DENY_PERMISSION = "deny_permission"  # Role held, permission missing
