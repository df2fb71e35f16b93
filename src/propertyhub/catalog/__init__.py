"""
Catálogo de propiedades y directorio de servicios.
"""

from propertyhub.catalog.demo_data import (
    DEMO_PROPERTY_ROWS,
    get_demo_properties,
    get_demo_property_by_id,
)
from propertyhub.catalog.listings import CatalogResult, PropertyCatalog
from propertyhub.catalog.services_directory import (
    find_professionals,
    get_service_categories,
    get_service_category,
)

__all__ = [
    # Demo
    "DEMO_PROPERTY_ROWS",
    "get_demo_properties",
    "get_demo_property_by_id",
    # Catálogo
    "CatalogResult",
    "PropertyCatalog",
    # Servicios
    "find_professionals",
    "get_service_categories",
    "get_service_category",
]
