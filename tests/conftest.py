# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
import os

import pytest
from fastapi.testclient import TestClient

# Set test environment before importing app
os.environ["BACKOFFICE_LOG_LEVEL"] = "DEBUG"

from src.config import get_settings
from src.main import app


@pytest.fixture(scope="function")
def client():
    """Create a test client."""
    with TestClient(app) as test_client:
        yield test_client
    get_settings.cache_clear()


@pytest.fixture
def identity_headers():
    """Build identity provider headers for a user holding the given roles."""

    def build(*roles: str, user_id: str = "user-1") -> dict[str, str]:
        settings = get_settings()
        headers = {settings.user_id_header: user_id}
        if roles:
            headers[settings.roles_header] = ",".join(roles)
        return headers

    return build


@pytest.fixture
def admin_headers(identity_headers) -> dict[str, str]:
    """Headers for a system administrator."""
    return identity_headers("admin", user_id="admin-1")


@pytest.fixture
def data_entry_headers(identity_headers) -> dict[str, str]:
    """Headers for a data entry clerk."""
    return identity_headers("data_entry", user_id="clerk-1")
