"""
Filtrado de listings en memoria.
"""

from propertyhub.filtering.listing_filter import (
    ANY,
    PRICE_BRACKETS,
    FilterCriteria,
    PriceBracket,
    filter_properties,
    matches_criteria,
)

__all__ = [
    "ANY",
    "PRICE_BRACKETS",
    "FilterCriteria",
    "PriceBracket",
    "filter_properties",
    "matches_criteria",
]
