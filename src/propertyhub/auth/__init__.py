"""
Autenticación de usuarios vía Supabase Auth.
"""

from propertyhub.auth.errors import (
    AuthError,
    NotAuthenticatedError,
    PermissionDeniedError,
)
from propertyhub.auth.service import AuthService, AuthState

__all__ = [
    "AuthService",
    "AuthState",
    "AuthError",
    "NotAuthenticatedError",
    "PermissionDeniedError",
]
