"""Pydantic schemas package."""
from src.schemas.common import HealthResponse
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

__all__ = [
    "AccessProfileSchema",
    "DashboardModulesSchema",
    "DecisionSchema",
    "FieldVisibilitySchema",
    "GateDecisionSchema",
    "GateRequestSchema",
    "HealthResponse",
    "ModuleActionsSchema",
    "RoleSchema",
    "RoleWithPermissionsSchema",
]
