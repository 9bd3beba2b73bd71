"""Catalog records and the boundary adapter that validates them."""

from catalog.models import CustomerVoices, MatchDetail, ScoredShoe, Shoe
from catalog.loader import (
    CatalogValidationError,
    brand_options,
    load_catalog,
    parse_catalog,
    price_bounds,
)

__all__ = [
    "CustomerVoices",
    "MatchDetail",
    "ScoredShoe",
    "Shoe",
    "CatalogValidationError",
    "brand_options",
    "load_catalog",
    "parse_catalog",
    "price_bounds",
]
