"""
Catalog boundary adapter.

Validates already-fetched catalog records (dicts, or a JSON array export)
into Shoe models before they reach the ranking engine.  A malformed
record is rejected with the index and id of the offending row.
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from pydantic import ValidationError

from catalog.models import Shoe
from config.constants import DEFAULT_RANKING_CONFIG
from core.logging import get_logger

logger = get_logger(__name__)


class CatalogValidationError(ValueError):
    """A catalog record failed validation."""

    def __init__(self, index: int, record_id: Optional[str], errors: ValidationError):
        self.index = index
        self.record_id = record_id
        self.errors = errors
        super().__init__(
            f"Catalog record {index} (id={record_id!r}) is invalid: "
            f"{errors.error_count()} error(s)"
        )


def parse_catalog(records: Iterable[Dict[str, Any]]) -> List[Shoe]:
    """Validate ``records`` into Shoe models, preserving catalog order."""
    shoes: List[Shoe] = []
    for index, record in enumerate(records):
        try:
            shoes.append(Shoe.model_validate(record))
        except ValidationError as e:
            record_id = record.get("id") if isinstance(record, dict) else None
            logger.warning(
                "Rejected catalog record",
                index=index,
                record_id=record_id,
                errors=e.errors(include_url=False),
            )
            raise CatalogValidationError(index, record_id, e) from e
    return shoes


def load_catalog(path: Union[str, Path]) -> List[Shoe]:
    """Read a JSON array export of catalog records."""
    path = Path(path)
    with open(path, encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, list):
        raise ValueError(f"Catalog export {path} must be a JSON array, got {type(data).__name__}")

    shoes = parse_catalog(data)
    logger.info("Loaded catalog", path=str(path), shoes=len(shoes))
    return shoes


def price_bounds(
    shoes: Iterable[Shoe],
    default: Tuple[float, float] = DEFAULT_RANKING_CONFIG.DEFAULT_PRICE_RANGE,
) -> Tuple[float, float]:
    """(min, max) EUR price across ``shoes``, or ``default`` when empty."""
    prices = [shoe.price_eur for shoe in shoes]
    if not prices:
        return default
    return min(prices), max(prices)


def brand_options(shoes: Iterable[Shoe]) -> List[str]:
    """Unique brands in first-seen order."""
    return list(dict.fromkeys(shoe.brand for shoe in shoes))
