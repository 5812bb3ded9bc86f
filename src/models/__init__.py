# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Access model package."""

from src.models.enums import (
    AppRole,
    DataScope,
    GateOutcome,
    RecordAction,
    SystemCapability,
)

__all__ = [
    "AppRole",
    "DataScope",
    "GateOutcome",
    "RecordAction",
    "SystemCapability",
]
