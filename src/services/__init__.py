"""Services package."""
from src.services import rbac_service

__all__ = [
    "rbac_service",
]
