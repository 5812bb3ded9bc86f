# src/services/rbac_service.py
"""Role-based access decisions.

Every function here is pure and total: an unknown role, resource, action or
module never raises and always resolves to the least privileged answer
(False, level 0, the OWN scope or an empty list).

The answers are advisory and drive what the client renders. Row level
enforcement stays with the database.
"""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from src.models.enums import (
    AppRole,
    DataScope,
    GateOutcome,
    RecordAction,
    SystemCapability,
)
from src.rbac.dashboard import (
    DASHBOARD_MODULES,
    EMPTY_DASHBOARD,
    NAVIGATION_ITEMS,
    QUICK_ACTIONS,
    DashboardModules,
)
from src.rbac.permissions import (
    ALL_FIELDS,
    FIELD_PERMISSIONS,
    MATRIX_ACTIONS,
    MATRIX_RESOURCES,
    MODULE_ACTIONS,
    Permission,
)
from src.rbac.roles import ROLES, RoleDefinition

logger = logging.getLogger(__name__)

RoleLike = AppRole | str


@dataclass(frozen=True)
class AccessDecision:
    """Outcome of an access gate together with what was asked for."""

    outcome: GateOutcome
    required_role: RoleLike
    required_permission: Permission | None = None

    @property
    def allowed(self) -> bool:
        return self.outcome is GateOutcome.ALLOW


def to_role(value: Any) -> AppRole | None:
    """Return the AppRole for a value, or None when it is not a known role."""
    if isinstance(value, AppRole):
        return value
    try:
        return AppRole(value)
    except (ValueError, TypeError):
        return None


def get_role_definition(role: RoleLike) -> RoleDefinition | None:
    """Look up the definition of a role."""
    app_role = to_role(role)
    if app_role is None:
        return None
    return ROLES[app_role]


def list_role_definitions() -> list[RoleDefinition]:
    """All role definitions, most privileged first."""
    return sorted(ROLES.values(), key=lambda definition: definition.level, reverse=True)


def parse_roles(values: Iterable[str]) -> tuple[list[AppRole], list[str]]:
    """Split role strings from the identity provider into known and rejected.

    Duplicates are dropped, first occurrence order is kept.

    Returns:
        Tuple of (known roles, rejected role strings)
    """
    known: list[AppRole] = []
    rejected: list[str] = []

    for value in values:
        role = to_role(value)
        if role is None:
            if value not in rejected:
                rejected.append(value)
        elif role not in known:
            known.append(role)

    if rejected:
        logger.warning(f"Ignoring unknown roles: {rejected}")
    return known, rejected


def _as_roles(roles: RoleLike | Iterable[RoleLike] | None) -> list[AppRole]:
    if roles is None:
        return []
    if isinstance(roles, str):
        roles = [roles]
    result = []
    for value in roles:
        role = to_role(value)
        if role is not None and role not in result:
            result.append(role)
    return result


def resolve_primary_role(roles: RoleLike | Iterable[RoleLike] | None) -> AppRole | None:
    """Pick the highest level known role out of a role set."""
    known = _as_roles(roles)
    if not known:
        return None
    return max(known, key=get_role_level)


# Permission lookup


def has_permission(role: RoleLike, resource: str, action: str) -> bool:
    """Check whether a role may perform an action on a resource."""
    definition = get_role_definition(role)
    if definition is None:
        return False
    return action in definition.actions_for(resource)


def can_access_module(role: RoleLike, module: str) -> bool:
    """Check whether a role may see a named UI module."""
    definition = get_role_definition(role)
    if definition is None:
        return False
    return module in definition.visible_modules


def visible_modules_for(role: RoleLike) -> list[str]:
    """Modules a role may see, in catalog order."""
    definition = get_role_definition(role)
    if definition is None:
        return []
    return list(definition.visible_modules)


def can_any_role_access_module(roles: Iterable[RoleLike], module: str) -> bool:
    """Check whether any of the held roles may see a module."""
    return any(can_access_module(role, module) for role in _as_roles(roles))


def get_data_scope(role: RoleLike) -> DataScope:
    """Return the data scope of a role, OWN when the role is unknown."""
    definition = get_role_definition(role)
    if definition is None:
        return DataScope.OWN
    return definition.data_access.data_scope


def can_perform_action(role: RoleLike, action: RecordAction | str, resource: str | None = None) -> bool:
    """Coarse, role wide check of a record action.

    This reads the role's data access flags and ignores ``resource``; use
    has_permission for a resource specific answer.
    """
    definition = get_role_definition(role)
    if definition is None:
        return False

    data_access = definition.data_access
    flags = {
        RecordAction.VIEW: data_access.can_view_all,
        RecordAction.EDIT: data_access.can_edit_all,
        RecordAction.DELETE: data_access.can_delete_all,
        RecordAction.CREATE: data_access.can_create_all,
    }
    try:
        return flags[RecordAction(action)]
    except (ValueError, TypeError):
        return False


def has_system_access(role: RoleLike, capability: SystemCapability | str) -> bool:
    """Check a single system capability flag of a role."""
    try:
        capability = SystemCapability(capability)
    except (ValueError, TypeError):
        return False
    return system_access_for(role)[capability.value]


def system_access_for(role: RoleLike) -> dict[str, bool]:
    """All system capability flags of a role, keyed by capability name."""
    definition = get_role_definition(role)
    if definition is None:
        return {capability.value: False for capability in SystemCapability}
    return {
        capability.value: getattr(definition.system_access, f"can_{capability.value}")
        for capability in SystemCapability
    }


def module_actions(role: RoleLike, module: str) -> list[str]:
    """Module specific actions for a role, independent of role permissions."""
    app_role = to_role(role)
    table = MODULE_ACTIONS.get(module)
    if app_role is None or table is None:
        return []
    return list(table.get(app_role, ()))


def permission_matrix(
    role: RoleLike,
    resources: Iterable[str] = MATRIX_RESOURCES,
    actions: Iterable[str] = MATRIX_ACTIONS,
) -> dict[str, dict[str, bool]]:
    """Build a resource by action grid of has_permission answers."""
    actions = tuple(actions)
    return {
        resource: {action: has_permission(role, resource, action) for action in actions}
        for resource in resources
    }


# Hierarchy


def get_role_level(role: RoleLike) -> int:
    """Return the level of a role, 0 when the role is unknown."""
    definition = get_role_definition(role)
    if definition is None:
        return 0
    return definition.level


def can_manage_role(acting_role: RoleLike, target_role: RoleLike) -> bool:
    """A role manages only roles strictly below its own level."""
    return get_role_level(acting_role) > get_role_level(target_role)


def manageable_roles(role: RoleLike) -> list[AppRole]:
    """Roles the given role can manage, most privileged first."""
    return [
        definition.role
        for definition in list_role_definitions()
        if can_manage_role(role, definition.role)
    ]


# Field visibility


def visible_fields_by_denylist(role: RoleLike, record: Mapping[str, Any]) -> list[str]:
    """Fields of a record left after removing the role's restricted fields.

    The record's key order is preserved. An unknown role sees nothing.
    """
    definition = get_role_definition(role)
    if definition is None:
        return []
    restricted = definition.data_access.restricted_fields
    return [name for name in record if name not in restricted]


def filter_record_by_denylist(role: RoleLike, record: Mapping[str, Any]) -> dict[str, Any]:
    """Copy of a record holding only the fields the denylist leaves visible."""
    return {name: record[name] for name in visible_fields_by_denylist(role, record)}


def visible_fields_by_allowlist(role: RoleLike, resource: str) -> list[str]:
    """Allowed field names for a role on a resource.

    A list containing ALL_FIELDS means every field. An unknown role or a
    resource without an entry gives an empty list.
    """
    app_role = to_role(role)
    if app_role is None:
        return []
    return list(FIELD_PERMISSIONS[app_role].get(resource, ()))


def filter_record_by_allowlist(role: RoleLike, resource: str, record: Mapping[str, Any]) -> dict[str, Any]:
    """Copy of a record holding only allowlisted fields, in record order."""
    allowed = visible_fields_by_allowlist(role, resource)
    if ALL_FIELDS in allowed:
        return dict(record)
    return {name: value for name, value in record.items() if name in allowed}


# Dashboard and navigation


def dashboard_modules_for(role: RoleLike) -> DashboardModules:
    """Dashboard widgets of a role, nothing for an unknown role."""
    app_role = to_role(role)
    if app_role is None:
        return EMPTY_DASHBOARD
    return DASHBOARD_MODULES[app_role]


def navigation_for(roles: RoleLike | Iterable[RoleLike]) -> list[str]:
    """Navigation entries any of the held roles may see, in menu order."""
    held = set(_as_roles(roles))
    return [item.name for item in NAVIGATION_ITEMS if item.roles & held]


def quick_actions_for(roles: RoleLike | Iterable[RoleLike]) -> list[str]:
    """Record action buttons offered for the highest held role."""
    primary = resolve_primary_role(roles)
    if primary is None:
        return []
    return list(QUICK_ACTIONS[primary])


# Access gate


def evaluate_access_gate(
    current_roles: RoleLike | Iterable[RoleLike] | None,
    required_role: RoleLike,
    required_permission: Permission | None = None,
) -> AccessDecision:
    """Decide whether gated content may be shown.

    The required role must be among the held roles, otherwise DENY_ROLE.
    When a permission is also required and none of the held roles grants it,
    the outcome is DENY_PERMISSION.
    """
    held = _as_roles(current_roles)
    wanted = to_role(required_role)

    if wanted is None or wanted not in held:
        return AccessDecision(GateOutcome.DENY_ROLE, required_role, required_permission)

    if required_permission is not None and not any(
        has_permission(role, required_permission.resource, required_permission.action)
        for role in held
    ):
        return AccessDecision(GateOutcome.DENY_PERMISSION, required_role, required_permission)

    return AccessDecision(GateOutcome.ALLOW, required_role, required_permission)
