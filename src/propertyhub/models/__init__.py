"""
Modelos de datos del sistema.
"""

from propertyhub.models.property import (
    Property,
    PropertyForm,
    PropertyType,
    PropertyStatus,
    PROPERTY_TYPES,
)
from propertyhub.models.profile import Profile, UserRole
from propertyhub.models.service import Professional, ServiceCategory

__all__ = [
    # Propiedades
    "Property",
    "PropertyForm",
    "PropertyType",
    "PropertyStatus",
    "PROPERTY_TYPES",
    # Usuarios
    "Profile",
    "UserRole",
    # Servicios
    "Professional",
    "ServiceCategory",
]
