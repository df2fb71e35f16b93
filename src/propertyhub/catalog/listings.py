"""
Catálogo de propiedades.

Lee las propiedades disponibles desde Supabase, cae al dataset demo
cuando la base está vacía o no responde, y aplica el filtro de listings.
"""

from dataclasses import dataclass, field
from typing import Optional

import structlog
from pydantic import ValidationError
from tenacity import Retrying, stop_after_attempt, wait_exponential

from propertyhub.catalog.demo_data import get_demo_properties, get_demo_property_by_id
from propertyhub.config import Settings, get_settings
from propertyhub.database import PropertyRepository
from propertyhub.filtering import FilterCriteria, filter_properties
from propertyhub.models import Property

logger = structlog.get_logger()


@dataclass
class CatalogResult:
    """Propiedades devueltas por el catálogo y de dónde salieron."""

    properties: list[Property] = field(default_factory=list)
    is_demo: bool = False
    error: Optional[str] = None  # Error de conexión si se cayó al demo


class PropertyCatalog:
    """
    Fuente de propiedades para el buscador.

    Flujo de `load`:
    1. Leer disponibles de Supabase (con reintentos)
    2. Si falla o viene vacío, usar las propiedades demo
    3. Descartar filas que no validan contra el modelo
    """

    def __init__(
        self,
        repository: Optional[PropertyRepository] = None,
        settings: Optional[Settings] = None,
        wait=None,
    ):
        self.settings = settings or get_settings()
        self.repository = repository or PropertyRepository()
        self._retrying = Retrying(
            stop=stop_after_attempt(self.settings.fetch_attempts),
            wait=wait if wait is not None else wait_exponential(multiplier=1, min=2, max=10),
            reraise=True,
        )

    def load(self) -> CatalogResult:
        """Obtiene las propiedades disponibles, más recientes primero."""
        try:
            rows = self._retrying(self.repository.get_available)
        except Exception as e:
            logger.error("Error obteniendo propiedades", error=str(e))
            if not self.settings.demo_fallback_enabled:
                raise
            return CatalogResult(get_demo_properties(), is_demo=True, error=str(e))

        properties = self._parse_rows(rows or [])
        if not properties and self.settings.demo_fallback_enabled:
            logger.info("Sin propiedades en la base, usando demo")
            return CatalogResult(get_demo_properties(), is_demo=True)

        return CatalogResult(properties)

    def search(self, criteria: FilterCriteria) -> CatalogResult:
        """Carga el catálogo y aplica los criterios del buscador."""
        result = self.load()
        matches = filter_properties(result.properties, criteria)
        logger.info(
            "Búsqueda de propiedades",
            total=len(result.properties),
            matches=len(matches),
            active_filters=criteria.active_filters_count,
            demo=result.is_demo,
        )
        return CatalogResult(matches, is_demo=result.is_demo, error=result.error)

    def get_property(self, property_id: str) -> Optional[Property]:
        """Busca una propiedad en la base y, si no está, en el demo."""
        try:
            row = self.repository.get_by_id(property_id)
        except Exception as e:
            logger.error("Error obteniendo propiedad", property_id=property_id, error=str(e))
            row = None

        if row is not None:
            return Property.model_validate(row)
        if self.settings.demo_fallback_enabled:
            return get_demo_property_by_id(property_id)
        return None

    def _parse_rows(self, rows: list[dict]) -> list[Property]:
        properties = []
        for row in rows:
            try:
                properties.append(Property.model_validate(row))
            except ValidationError as e:
                logger.warning(
                    "Fila de propiedad inválida",
                    property_id=row.get("id"),
                    error=str(e),
                )
        return properties
