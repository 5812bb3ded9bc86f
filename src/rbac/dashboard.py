# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Per-role dashboard widgets, navigation entries and quick actions."""

from dataclasses import dataclass
from types import MappingProxyType

from src.models.enums import AppRole


@dataclass(frozen=True)
class DashboardModules:
    """Named widgets a dashboard should render."""

    kpis: tuple[str, ...] = ()
    charts: tuple[str, ...] = ()
    tables: tuple[str, ...] = ()
    actions: tuple[str, ...] = ()


@dataclass(frozen=True)
class NavigationItem:
    """A navigation entry and the roles that may see it."""

    name: str
    roles: frozenset[AppRole]


EMPTY_DASHBOARD = DashboardModules()

DASHBOARD_MODULES = MappingProxyType(
    {
        AppRole.ADMIN: DashboardModules(
            kpis=("revenue", "expenses", "profit", "fleet_utilization", "maintenance_costs"),
            charts=("revenue_trend", "expense_breakdown", "fleet_performance", "customer_analytics"),
            tables=("recent_invoices", "pending_expenses", "fleet_status", "maintenance_schedule"),
            actions=("create_invoice", "approve_expense", "assign_fleet", "manage_users"),
        ),
        AppRole.GENERAL_MANAGER: DashboardModules(
            kpis=("revenue", "expenses", "profit", "fleet_utilization"),
            charts=("revenue_trend", "expense_breakdown", "fleet_performance"),
            tables=("recent_invoices", "pending_expenses", "fleet_status"),
            actions=("create_invoice", "approve_expense", "assign_fleet"),
        ),
        AppRole.SUPERVISOR: DashboardModules(
            kpis=("revenue", "expenses", "fleet_utilization"),
            charts=("revenue_trend", "expense_breakdown"),
            tables=("recent_invoices", "pending_expenses", "fleet_status"),
            actions=("create_invoice", "approve_expense"),
        ),
        AppRole.DATA_ENTRY: DashboardModules(
            kpis=("revenue", "expenses"),
            charts=("revenue_trend",),
            tables=("recent_invoices", "pending_expenses"),
            actions=("create_invoice", "create_expense"),
        ),
    }
)

_EVERYONE = frozenset(AppRole)

NAVIGATION_ITEMS = (
    NavigationItem(name="Dashboard", roles=_EVERYONE),
    NavigationItem(name="Invoices", roles=_EVERYONE),
    NavigationItem(name="Expenses", roles=_EVERYONE),
    NavigationItem(name="Fleet", roles=_EVERYONE),
    NavigationItem(name="Maintenance", roles=_EVERYONE),
    NavigationItem(name="User Management", roles=frozenset({AppRole.ADMIN})),
    NavigationItem(name="Settings", roles=frozenset({AppRole.ADMIN})),
)

# Record action buttons offered for the highest held role
QUICK_ACTIONS = MappingProxyType(
    {
        AppRole.ADMIN: ("create", "read", "update", "delete", "export"),
        AppRole.GENERAL_MANAGER: ("create", "read", "update", "export"),
        AppRole.SUPERVISOR: ("create", "read", "update", "export"),
        AppRole.DATA_ENTRY: ("create", "read"),
    }
)
