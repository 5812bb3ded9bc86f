# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for API dependencies."""

import pytest
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient

from src.api.deps import Identity, _split_roles, require_module, require_permission
from src.config import Settings, get_settings
from src.models.enums import AppRole


@pytest.fixture
def gated_client():
    """App exposing one route per gate dependency."""
    app = FastAPI()

    @app.get("/fleet")
    def fleet(identity: Identity = Depends(require_module("fleet"))):
        return {"user_id": identity.user_id}

    @app.get("/void")
    def void(identity: Identity = Depends(require_permission("invoices.void"))):
        return {"user_id": identity.user_id}

    with TestClient(app) as client:
        yield client


class TestSplitRoles:
    """Tests for parsing the roles header."""

    def test_split(self):
        assert _split_roles(" admin , supervisor,,") == ["admin", "supervisor"]

    def test_empty(self):
        assert _split_roles(None) == []
        assert _split_roles("") == []


class TestIdentity:
    """Tests for the Identity dataclass."""

    def test_primary_role(self):
        identity = Identity(user_id="u", roles=(AppRole.DATA_ENTRY, AppRole.SUPERVISOR))
        assert identity.primary_role is AppRole.SUPERVISOR

    def test_primary_role_without_roles(self):
        assert Identity(user_id="u").primary_role is None


class TestGateDependencies:
    """Tests for require_module and require_permission."""

    def test_module_allowed(self, gated_client):
        response = gated_client.get("/fleet", headers={"X-User-Id": "u1", "X-User-Roles": "data_entry"})
        assert response.status_code == 200
        assert response.json() == {"user_id": "u1"}

    def test_module_denied_for_unknown_role(self, gated_client):
        response = gated_client.get("/fleet", headers={"X-User-Id": "u1", "X-User-Roles": "moderator"})
        assert response.status_code == 403

    def test_permission_denied_is_logged(self, gated_client, caplog):
        with caplog.at_level("WARNING", logger="src.api.deps"):
            response = gated_client.get("/void", headers={"X-User-Id": "u2", "X-User-Roles": "supervisor"})
        assert response.status_code == 403
        assert "invoices.void" in caplog.text

    def test_permission_from_any_role(self, gated_client):
        response = gated_client.get(
            "/void", headers={"X-User-Id": "u3", "X-User-Roles": "data_entry,general_manager"}
        )
        assert response.status_code == 200

    def test_missing_user(self, gated_client):
        assert gated_client.get("/fleet", headers={"X-User-Roles": "admin"}).status_code == 401

    def test_permission_denied_detail_names_code(self, gated_client):
        response = gated_client.get("/void", headers={"X-User-Id": "u4", "X-User-Roles": "data_entry"})
        assert response.status_code == 403
        assert response.json()["detail"] == "Permission denied: invoices.void"

    @pytest.mark.parametrize("code", ["invoices", "invoices.", ".void"])
    def test_invalid_permission_code_rejected(self, code):
        """Test that a malformed code fails when the route is declared."""
        with pytest.raises(ValueError):
            require_permission(code)


class TestSettings:
    """Tests for header configuration."""

    def test_defaults(self):
        settings = Settings()
        assert settings.user_id_header == "X-User-Id"
        assert settings.roles_header == "X-User-Roles"

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("BACKOFFICE_ROLES_HEADER", "X-Roles")
        get_settings.cache_clear()
        try:
            assert get_settings().roles_header == "X-Roles"
        finally:
            get_settings.cache_clear()
