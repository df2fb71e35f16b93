"""
Modelo de Propiedad.

Representa una fila de la tabla 'properties' en Supabase y el
formulario del dashboard con el que agentes y admins la editan.
"""

from typing import Literal, Optional, get_args

from pydantic import BaseModel, ConfigDict, Field

PropertyType = Literal["house", "apartment", "commercial", "land"]
PropertyStatus = Literal["available", "sold", "rented"]

PROPERTY_TYPES: list[str] = list(get_args(PropertyType))


class Property(BaseModel):
    """
    Propiedad publicada en el marketplace.

    Las filas se crean, actualizan y borran solo a través de Supabase;
    el resto del sistema las trata como valores de solo lectura.
    """

    model_config = ConfigDict(from_attributes=True, extra="ignore")

    # Identificadores
    id: Optional[str] = Field(None, description="UUID generado por Supabase")
    agent_id: Optional[str] = Field(None, description="FK al perfil del agente")

    # Contenido textual
    title: str = Field(..., description="Título del anuncio")
    description: Optional[str] = Field(None, description="Descripción completa")
    location: str = Field(..., description="Ubicación como texto libre")

    # Precio (número plano, sin unidades menores)
    price: float = Field(..., ge=0, description="Precio en KES")

    # Clasificación
    property_type: PropertyType = Field(..., description="house, apartment, commercial o land")
    status: PropertyStatus = Field(default="available", description="available, sold o rented")

    # Características físicas
    bedrooms: Optional[int] = Field(None, ge=0, description="Cantidad de dormitorios")
    bathrooms: Optional[int] = Field(None, ge=0, description="Cantidad de baños")
    area_sqft: Optional[float] = Field(None, gt=0, description="Superficie en pies²")

    # Listas (pueden tener duplicados)
    features: list[str] = Field(default_factory=list, description="Tags de características")
    images: list[str] = Field(default_factory=list, description="URLs de imágenes")

    # Metadatos
    created_at: Optional[str] = Field(None, description="Timestamp de alta ISO")
    updated_at: Optional[str] = Field(None, description="Timestamp de última edición ISO")

    @property
    def display_price(self) -> str:
        """Precio abreviado: 'KSh 12.5M' desde el millón, 'KSh 850,000' por debajo."""
        if self.price >= 1_000_000:
            return f"KSh {self.price / 1_000_000:.1f}M"
        return f"KSh {self.price:,.0f}"

    @property
    def short_id(self) -> str:
        return (self.id or "")[:8]

    def inquiry_message(self) -> str:
        """Mensaje de consulta que se envía al agente de la propiedad."""
        return (
            f'Hi, I\'m interested in the property "{self.title}" located at '
            f"{self.location}. Could you please provide more details?"
        )

    def share_text(self, base_url: str) -> str:
        """Texto para compartir la propiedad con su link público."""
        url = f"{base_url.rstrip('/')}/property/{self.id}"
        return f"Check out this amazing property: {self.title} in {self.location} - {url}"

    def to_db_dict(self) -> dict:
        """Convierte a diccionario para insert/update en Supabase."""
        return self.model_dump(exclude={"id", "created_at", "updated_at"})


def _split_list(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


def _optional_int(value: str) -> Optional[int]:
    value = value.strip()
    return int(value) if value else None


def _optional_float(value: str) -> Optional[float]:
    value = value.strip()
    return float(value) if value else None


class PropertyForm(BaseModel):
    """
    Estado del formulario de alta/edición del dashboard.

    Todos los campos son strings tal como los escribe el usuario;
    `to_property` los normaliza y valida.
    """

    title: str = ""
    description: str = ""
    price: str = ""
    location: str = ""
    property_type: PropertyType = "house"
    bedrooms: str = ""
    bathrooms: str = ""
    area_sqft: str = ""
    features: str = Field("", description="Lista separada por comas")
    images: str = Field("", description="URLs separadas por comas")
    status: PropertyStatus = "available"

    def to_property(self, agent_id: Optional[str] = None) -> Property:
        """
        Construye la Property a persistir.

        Raises:
            ValueError: Si un campo numérico no se puede parsear o
                el resultado no cumple las validaciones del modelo
        """
        return Property(
            title=self.title,
            description=self.description or None,
            price=float(self.price),
            location=self.location,
            property_type=self.property_type,
            bedrooms=_optional_int(self.bedrooms),
            bathrooms=_optional_int(self.bathrooms),
            area_sqft=_optional_float(self.area_sqft),
            features=_split_list(self.features),
            images=_split_list(self.images),
            status=self.status,
            agent_id=agent_id,
        )

    @classmethod
    def from_property(cls, prop: Property) -> "PropertyForm":
        """Precarga el formulario para editar una propiedad existente."""

        def _fmt(value) -> str:
            if value is None:
                return ""
            if isinstance(value, float) and value.is_integer():
                return str(int(value))
            return str(value)

        return cls(
            title=prop.title,
            description=prop.description or "",
            price=_fmt(prop.price),
            location=prop.location,
            property_type=prop.property_type,
            bedrooms=_fmt(prop.bedrooms),
            bathrooms=_fmt(prop.bathrooms),
            area_sqft=_fmt(prop.area_sqft),
            features=", ".join(prop.features),
            images=", ".join(prop.images),
            status=prop.status,
        )
