# src/schemas/rbac.py
from pydantic import BaseModel, ConfigDict, model_validator

from src.models.enums import AppRole, DataScope, GateOutcome


class ResourcePermissionSchema(BaseModel):
    """Schema representing the actions granted on one resource."""

    model_config = ConfigDict(from_attributes=True)

    resource: str
    actions: list[str]


class DataAccessSchema(BaseModel):
    """Schema representing a role's coarse data access."""

    model_config = ConfigDict(from_attributes=True)

    can_view_all: bool
    can_edit_all: bool
    can_delete_all: bool
    can_create_all: bool
    data_scope: DataScope
    restricted_fields: list[str]


class SystemAccessSchema(BaseModel):
    """Schema representing a role's system capabilities."""

    model_config = ConfigDict(from_attributes=True)

    can_manage_users: bool
    can_view_reports: bool
    can_export_data: bool
    can_import_data: bool
    can_manage_settings: bool
    can_view_audit_logs: bool


class RoleSchema(BaseModel):
    """Schema representing a role."""

    model_config = ConfigDict(from_attributes=True)

    role: AppRole
    name: str
    description: str
    level: int


class RoleWithPermissionsSchema(RoleSchema):
    """Schema representing a role along with its full definition."""

    permissions: list[ResourcePermissionSchema]
    visible_modules: list[str]
    data_access: DataAccessSchema
    system_access: SystemAccessSchema

    @classmethod
    def from_definition(cls, definition) -> "RoleWithPermissionsSchema":
        """Build the schema from a RoleDefinition."""
        data_access = definition.data_access
        return cls(
            role=definition.role,
            name=definition.name,
            description=definition.description,
            level=definition.level,
            permissions=[
                ResourcePermissionSchema(resource=p.resource, actions=list(p.actions))
                for p in definition.permissions
            ],
            visible_modules=list(definition.visible_modules),
            data_access=DataAccessSchema(
                can_view_all=data_access.can_view_all,
                can_edit_all=data_access.can_edit_all,
                can_delete_all=data_access.can_delete_all,
                can_create_all=data_access.can_create_all,
                data_scope=data_access.data_scope,
                restricted_fields=sorted(data_access.restricted_fields),
            ),
            system_access=SystemAccessSchema.model_validate(definition.system_access),
        )


class DashboardModulesSchema(BaseModel):
    """Schema representing the dashboard widgets of a role."""

    model_config = ConfigDict(from_attributes=True)

    kpis: list[str]
    charts: list[str]
    tables: list[str]
    actions: list[str]


class AccessProfileSchema(BaseModel):
    """Schema representing everything the client needs to render for a user."""

    user_id: str
    roles: list[AppRole]
    rejected_roles: list[str]
    primary_role: AppRole | None
    level: int
    data_scope: DataScope
    visible_modules: list[str]
    system_access: dict[str, bool]
    navigation: list[str]
    quick_actions: list[str]
    manageable_roles: list[AppRole]


class DecisionSchema(BaseModel):
    """Schema for a yes/no access answer."""

    allowed: bool


class ModuleActionsSchema(BaseModel):
    """Schema listing module specific actions."""

    module: str
    role: AppRole | None
    actions: list[str]


class GateRequestSchema(BaseModel):
    """Schema for evaluating an access gate.

    ``resource`` and ``action`` must be given together.
    """

    required_role: str
    resource: str | None = None
    action: str | None = None

    @model_validator(mode="after")
    def check_permission_pair(self) -> "GateRequestSchema":
        if (self.resource is None) != (self.action is None):
            raise ValueError("resource and action must be provided together")
        return self


class GateDecisionSchema(BaseModel):
    """Schema representing the outcome of an access gate."""

    outcome: GateOutcome
    allowed: bool
    required_role: str
    resource: str | None = None
    action: str | None = None


class FieldVisibilitySchema(BaseModel):
    """Schema holding both field visibility answers for one record.

    The two lists come from independent tables and are not merged.
    """

    resource: str
    role: AppRole | None
    denylist: list[str]
    allowlist: list[str]
