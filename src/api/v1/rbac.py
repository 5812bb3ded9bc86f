# src/api/v1/rbac.py
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException

from src.api.deps import Identity, get_current_identity, require_module, require_permission
from src.models.enums import AppRole
from src.rbac.permissions import MODULE_ACTIONS, MODULES, RESOURCES, Permission
from src.schemas.rbac import (
    AccessProfileSchema,
    DashboardModulesSchema,
    DecisionSchema,
    FieldVisibilitySchema,
    GateDecisionSchema,
    GateRequestSchema,
    ModuleActionsSchema,
    RoleSchema,
    RoleWithPermissionsSchema,
)
from src.services import rbac_service

router = APIRouter()

@router.get("/rbac/roles", response_model=list[RoleSchema], summary="List all roles")
def list_roles(identity: Identity = Depends(get_current_identity)):
    """Retrieve the role catalog, most privileged role first."""
    return rbac_service.list_role_definitions()

@router.get("/rbac/roles/{role}", response_model=RoleWithPermissionsSchema, summary="Get a role with its permissions")
def get_role(role: str, identity: Identity = Depends(get_current_identity)):
    """Retrieve the full definition of a role."""
    definition = rbac_service.get_role_definition(role)
    if definition is None:
        raise HTTPException(status_code=404, detail="Role not found")
    return RoleWithPermissionsSchema.from_definition(definition)

@router.get("/rbac/matrix", response_model=dict[str, dict[str, dict[str, bool]]], summary="Permission matrix of every role")
def get_catalog_matrix(identity: Identity = Depends(require_permission("audit_logs.read"))):
    """Retrieve the permission matrix of every role, keyed by role.
    Requires audit_logs.read permission.
    """
    return {
        definition.role.value: rbac_service.permission_matrix(definition.role)
        for definition in rbac_service.list_role_definitions()
    }

@router.get("/rbac/me", response_model=AccessProfileSchema, summary="Get current user's access profile")
def get_my_profile(identity: Identity = Depends(get_current_identity)):
    """Retrieve everything the client needs to decide what to render for
    the current user. Per-role answers use the highest held role.
    """
    primary = identity.primary_role
    return AccessProfileSchema(
        user_id=identity.user_id,
        roles=list(identity.roles),
        rejected_roles=list(identity.rejected_roles),
        primary_role=primary,
        level=rbac_service.get_role_level(primary),
        data_scope=rbac_service.get_data_scope(primary),
        visible_modules=rbac_service.visible_modules_for(primary),
        system_access=rbac_service.system_access_for(primary),
        navigation=rbac_service.navigation_for(identity.roles),
        quick_actions=rbac_service.quick_actions_for(identity.roles),
        manageable_roles=rbac_service.manageable_roles(primary),
    )

@router.get("/rbac/me/dashboard", response_model=DashboardModulesSchema, summary="Get current user's dashboard widgets")
def get_my_dashboard(identity: Identity = Depends(require_module("dashboard"))):
    """Retrieve the dashboard widgets for the current user's highest role."""
    return rbac_service.dashboard_modules_for(identity.primary_role)

@router.get("/rbac/me/permissions", response_model=dict[str, dict[str, bool]], summary="Get current user's permission matrix")
def get_my_permissions(identity: Identity = Depends(get_current_identity)):
    """Retrieve the resource by action matrix for the current user's highest role."""
    return rbac_service.permission_matrix(identity.primary_role)

@router.get("/rbac/me/permissions/{resource}/{action}", response_model=DecisionSchema, summary="Check a single permission")
def check_my_permission(resource: str, action: str, identity: Identity = Depends(get_current_identity)):
    """Check whether any held role grants an action on a resource."""
    allowed = any(rbac_service.has_permission(role, resource, action) for role in identity.roles)
    return DecisionSchema(allowed=allowed)

@router.get("/rbac/me/modules/{module}", response_model=DecisionSchema, summary="Check module visibility")
def check_my_module(module: str, identity: Identity = Depends(get_current_identity)):
    """Check whether any held role may see a module."""
    if module not in MODULES:
        raise HTTPException(status_code=404, detail="Module not found")
    return DecisionSchema(allowed=rbac_service.can_any_role_access_module(identity.roles, module))

@router.get("/rbac/me/modules/{module}/actions", response_model=ModuleActionsSchema, summary="List module specific actions")
def get_my_module_actions(module: str, identity: Identity = Depends(get_current_identity)):
    """Retrieve the module specific actions for the current user's highest role."""
    if module not in MODULE_ACTIONS:
        raise HTTPException(status_code=404, detail="Module has no action table")
    primary = identity.primary_role
    return ModuleActionsSchema(
        module=module,
        role=primary,
        actions=rbac_service.module_actions(primary, module),
    )

@router.post("/rbac/gate", response_model=GateDecisionSchema, summary="Evaluate an access gate")
def evaluate_gate(gate_in: GateRequestSchema, identity: Identity = Depends(get_current_identity)):
    """Evaluate whether gated content may be rendered for the current user.
    The outcome tells role denials apart from permission denials.
    """
    permission = None
    if gate_in.resource is not None and gate_in.action is not None:
        permission = Permission(resource=gate_in.resource, action=gate_in.action)

    decision = rbac_service.evaluate_access_gate(identity.roles, gate_in.required_role, permission)
    return GateDecisionSchema(
        outcome=decision.outcome,
        allowed=decision.allowed,
        required_role=gate_in.required_role,
        resource=gate_in.resource,
        action=gate_in.action,
    )

@router.post("/rbac/fields/{resource}", response_model=FieldVisibilitySchema, summary="Resolve visible fields of a record")
def get_visible_fields(
    resource: str,
    record: dict[str, Any] = Body(...),
    identity: Identity = Depends(get_current_identity),
):
    """Resolve which fields of a record the current user's highest role may see.
    Returns the denylist and allowlist answers separately.
    """
    if resource not in RESOURCES:
        raise HTTPException(status_code=404, detail="Resource not found")
    primary = identity.primary_role
    return FieldVisibilitySchema(
        resource=resource,
        role=primary,
        denylist=rbac_service.visible_fields_by_denylist(primary, record),
        allowlist=rbac_service.visible_fields_by_allowlist(primary, resource),
    )

@router.get("/rbac/users/manageable-roles", response_model=list[AppRole], summary="List roles the current user may assign")
def get_manageable_roles(identity: Identity = Depends(require_module("user_management"))):
    """Retrieve the roles the current user outranks.
    Role assignment itself happens in the external user management endpoint.
    """
    return rbac_service.manageable_roles(identity.primary_role)
