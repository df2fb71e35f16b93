"""
Modelos del directorio de servicios.

Agentes inmobiliarios y personal doméstico agrupados por categoría.
"""

from pydantic import BaseModel, Field, computed_field


class Professional(BaseModel):
    """Profesional listado en el directorio."""

    id: int
    name: str
    rating: float = Field(..., ge=0, le=5)
    experience: str = Field(..., description="Ej: '8 years'")
    location: str
    specialties: list[str] = Field(default_factory=list)
    avatar: str = ""

    @computed_field
    @property
    def initials(self) -> str:
        """Iniciales para el avatar de respaldo."""
        return "".join(part[0] for part in self.name.split() if part)


class ServiceCategory(BaseModel):
    """Categoría de servicios con sus profesionales destacados."""

    id: int
    title: str
    description: str
    available_count: int = Field(..., ge=0, description="Profesionales disponibles")
    professionals: list[Professional] = Field(default_factory=list)
