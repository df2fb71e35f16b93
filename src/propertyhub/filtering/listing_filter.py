"""
Filtro de listings.

Reduce una colección de propiedades según los criterios del buscador:
texto libre, tipo de propiedad, rango de precio y ubicación.
Función pura: no hace I/O, no reordena y no modifica los registros.
"""

from dataclasses import dataclass
from typing import Literal, Optional, Sequence, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from propertyhub.models import Property, PropertyType

# Valor de los selectores que no restringe nada
ANY = "all"


@dataclass(frozen=True)
class PriceBracket:
    """
    Rango de precio con nombre.

    Los límites son cerrados en los rangos intermedios, así que un precio
    exacto de 20M pertenece a '10m-20m' y a '20m-50m'.
    """

    name: str
    label: str
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    min_inclusive: bool = True
    max_inclusive: bool = True

    def contains(self, price: float) -> bool:
        if self.min_price is not None:
            if price < self.min_price:
                return False
            if not self.min_inclusive and price == self.min_price:
                return False
        if self.max_price is not None:
            if price > self.max_price:
                return False
            if not self.max_inclusive and price == self.max_price:
                return False
        return True


PRICE_BRACKETS: dict[str, PriceBracket] = {
    bracket.name: bracket
    for bracket in (
        PriceBracket("under-10m", "Under KSh 10M", max_price=10_000_000, max_inclusive=False),
        PriceBracket("10m-20m", "KSh 10M - 20M", min_price=10_000_000, max_price=20_000_000),
        PriceBracket("20m-50m", "KSh 20M - 50M", min_price=20_000_000, max_price=50_000_000),
        PriceBracket("over-50m", "Over KSh 50M", min_price=50_000_000, min_inclusive=False),
    )
}

PropertyTypeSelector = Union[Literal["all"], PropertyType]


class FilterCriteria(BaseModel):
    """
    Criterios del buscador de propiedades.

    Cada campo es opcional por separado: su valor por defecto
    (string vacío o "all") no impone ninguna restricción.
    """

    model_config = ConfigDict(frozen=True)

    query: str = Field("", description="Texto libre sobre título, ubicación y descripción")
    property_type: PropertyTypeSelector = Field(ANY, description="Tipo exacto o 'all'")
    price_range: str = Field(ANY, description="Nombre del rango de precio o 'all'")
    location: str = Field("", description="Substring de la ubicación")

    @field_validator("price_range")
    @classmethod
    def _known_bracket(cls, value: str) -> str:
        if value != ANY and value not in PRICE_BRACKETS:
            raise ValueError(f"Unknown price range: {value!r}")
        return value

    @property
    def active_filters_count(self) -> int:
        """Cantidad de criterios que efectivamente restringen."""
        return sum(
            [
                bool(self.query),
                self.property_type != ANY,
                self.price_range != ANY,
                bool(self.location),
            ]
        )

    @property
    def is_empty(self) -> bool:
        return self.active_filters_count == 0


def _contains(haystack: Optional[str], needle: str) -> bool:
    return bool(haystack) and needle in haystack.lower()


def matches_criteria(record: Property, criteria: FilterCriteria) -> bool:
    """Indica si una propiedad cumple todos los criterios."""
    if criteria.query:
        query = criteria.query.lower()
        if not (
            _contains(record.title, query)
            or _contains(record.location, query)
            or _contains(record.description, query)
        ):
            return False

    if criteria.property_type != ANY and record.property_type != criteria.property_type:
        return False

    if criteria.location and not _contains(record.location, criteria.location.lower()):
        return False

    if criteria.price_range != ANY:
        if not PRICE_BRACKETS[criteria.price_range].contains(record.price):
            return False

    return True


def filter_properties(
    records: Sequence[Property], criteria: FilterCriteria
) -> list[Property]:
    """
    Filtra propiedades preservando el orden original.

    Args:
        records: Propiedades a filtrar (puede estar vacía)
        criteria: Criterios del buscador

    Returns:
        Nueva lista con las propiedades que cumplen todos los criterios
    """
    return [record for record in records if matches_criteria(record, criteria)]
