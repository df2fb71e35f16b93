"""Errores de autenticación y permisos."""


class AuthError(Exception):
    """El proveedor de Auth rechazó la operación."""


class NotAuthenticatedError(AuthError):
    """La operación requiere un usuario logueado."""


class PermissionDeniedError(AuthError):
    """El usuario no tiene el rol necesario."""
