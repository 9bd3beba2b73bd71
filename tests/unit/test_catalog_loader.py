"""
Unit tests for the catalog boundary adapter.

Run with: PYTHONPATH=src python -m pytest tests/unit/test_catalog_loader.py -v
"""

import json

import pytest
from pydantic import ValidationError

from catalog import (
    CatalogValidationError,
    Shoe,
    brand_options,
    load_catalog,
    parse_catalog,
    price_bounds,
)


class TestParseCatalog:

    def test_valid_records(self, shoe_record):
        second = dict(shoe_record, id="shoe-002", brand="Scarpa")
        shoes = parse_catalog([shoe_record, second])
        assert [s.id for s in shoes] == ["shoe-001", "shoe-002"]
        assert all(isinstance(s, Shoe) for s in shoes)

    def test_unknown_columns_ignored(self, shoe_record):
        shoes = parse_catalog([dict(shoe_record, created_at="2024-01-01")])
        assert not hasattr(shoes[0], "created_at")

    def test_optional_fields_default(self, shoe_record):
        record = {k: v for k, v in shoe_record.items() if k not in ("vegan", "price_usd", "image_url")}
        shoe = parse_catalog([record])[0]
        assert shoe.vegan is False
        assert shoe.price_usd is None
        assert shoe.toe_box_width is None

    def test_customer_voices(self, shoe_record):
        record = dict(shoe_record, customer_voices={"pros": ["sticky"], "fit": "runs small"})
        shoe = parse_catalog([record])[0]
        assert shoe.customer_voices.pros == ["sticky"]
        assert shoe.customer_voices.cons == []
        assert shoe.customer_voices.fit == "runs small"

    def test_bad_vocabulary_rejected(self, shoe_record):
        bad = dict(shoe_record, id="shoe-bad", downturn="extreme")
        with pytest.raises(CatalogValidationError) as exc_info:
            parse_catalog([shoe_record, bad])
        err = exc_info.value
        assert err.index == 1
        assert err.record_id == "shoe-bad"
        assert isinstance(err.errors, ValidationError)
        assert isinstance(err, ValueError)
        assert "shoe-bad" in str(err)

    def test_negative_price_rejected(self, shoe_record):
        with pytest.raises(CatalogValidationError):
            parse_catalog([dict(shoe_record, price_eur=-1)])

    def test_missing_required_field_rejected(self, shoe_record):
        record = {k: v for k, v in shoe_record.items() if k != "midsole"}
        with pytest.raises(CatalogValidationError) as exc_info:
            parse_catalog([record])
        assert exc_info.value.index == 0

    def test_shoes_are_frozen(self, shoe_record):
        shoe = parse_catalog([shoe_record])[0]
        with pytest.raises(ValidationError):
            shoe.price_eur = 10.0


class TestLoadCatalog:

    def test_load_json_array(self, tmp_path, shoe_record):
        path = tmp_path / "shoes.json"
        path.write_text(json.dumps([shoe_record, dict(shoe_record, id="shoe-002")]), encoding="utf-8")

        shoes = load_catalog(path)

        assert [s.id for s in shoes] == ["shoe-001", "shoe-002"]

    def test_accepts_str_path(self, tmp_path, shoe_record):
        path = tmp_path / "shoes.json"
        path.write_text(json.dumps([shoe_record]), encoding="utf-8")
        assert len(load_catalog(str(path))) == 1

    def test_non_array_rejected(self, tmp_path, shoe_record):
        path = tmp_path / "shoes.json"
        path.write_text(json.dumps({"shoes": [shoe_record]}), encoding="utf-8")
        with pytest.raises(ValueError):
            load_catalog(path)


class TestCatalogHelpers:

    def test_price_bounds(self, make_shoe):
        shoes = [make_shoe(price_eur=120.0), make_shoe(price_eur=89.0), make_shoe(price_eur=199.0)]
        assert price_bounds(shoes) == (89.0, 199.0)

    def test_price_bounds_empty_catalog(self):
        assert price_bounds([]) == (50.0, 250.0)

    def test_brand_options_first_seen_order(self, make_shoe):
        shoes = [make_shoe(brand="Scarpa"), make_shoe(brand="La Sportiva"), make_shoe(brand="Scarpa")]
        assert brand_options(shoes) == ["Scarpa", "La Sportiva"]
