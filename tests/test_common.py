"""Tests for shared models and settings, plus logging setup."""

import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from src.common.config import (
    DEFAULT_COMPARABLE_SPEC_KEYS,
    CatalogSettings,
    RelatedProductsSettings,
    Settings,
)
from src.common.logging import setup_logging
from src.common.models import MediaFile, MediaType, Product
from src.related_products.scorer import similarity_score


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("RELATED_TARGET_COUNT", "RELATED_RANDOM_SEED", "CATALOG_PATH", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestProduct:
    def test_create_product(self, sample_product_data: dict):
        product = Product(**sample_product_data)
        assert product.id == "SP-SAMPLE-001"
        assert product.brand == "Trina Solar"
        assert product.category == "solar-panels"
        assert product.specs["wattage"] == "600"

    def test_minimal_product(self):
        product = Product(id="X", brand="BYD", category="batteries")
        assert product.specs == {}
        assert product.price == 0
        assert product.media == []

    def test_integer_id_coerced_to_string(self):
        product = Product(id=42, brand="Deye", category="inverters")
        assert product.id == "42"

    def test_numeric_specs_kept(self):
        product = Product(
            id="X", brand="B", category="inverters",
            specs={"power": 5000, "efficiency": "97.6%"},
        )
        assert product.specs["power"] == 5000
        assert product.specs["efficiency"] == "97.6%"

    def test_null_specs_dropped(self):
        product = Product(
            id="X", brand="B", category="inverters",
            specs={"power": None, "voltage": "230V"},
        )
        assert product.specs == {"voltage": "230V"}

        assert Product(id="Y", brand="B", category="inverters", specs=None).specs == {}

    def test_price_must_be_non_negative(self):
        with pytest.raises(ValidationError):
            Product(id="X", brand="B", category="batteries", price=-100)

    def test_missing_brand_rejected(self):
        with pytest.raises(ValidationError):
            Product.model_validate({"id": "X", "category": "batteries"})

    def test_created_at_alias(self):
        product = Product.model_validate(
            {"id": "X", "brand": "B", "category": "batteries", "createdAt": "2024-05-01"}
        )
        assert product.created_at == "2024-05-01"
        assert product.to_dict()["createdAt"] == "2024-05-01"

    def test_unknown_fields_ignored(self):
        product = Product.model_validate(
            {"id": "X", "brand": "B", "category": "batteries", "sku": "BAT-001-XX"}
        )
        assert not hasattr(product, "sku")

    def test_frozen(self, sample_product: Product):
        with pytest.raises(ValidationError):
            sample_product.brand = "Other"

    def test_to_dict(self, sample_product: Product):
        d = sample_product.to_dict()
        assert d["id"] == "SP-SAMPLE-001"
        assert d["specs"]["voltage"] == "42.1V"
        assert "createdAt" not in d

    def test_media(self):
        product = Product(
            id="X", brand="B", category="inverters",
            media=[{"url": "https://example.com/v.mp4", "type": "video", "public_id": "v1", "order": 1}],
        )
        assert isinstance(product.media[0], MediaFile)
        assert product.media[0].type == MediaType.VIDEO

    def test_invalid_media_type(self):
        with pytest.raises(ValidationError):
            MediaFile(url="https://example.com/a.gif", type="gif")


class TestSettings:
    def test_defaults(self):
        s = Settings()
        assert s.related.target_count == 4
        assert s.related.score_bucket_width == 5.0
        assert s.related.comparable_spec_keys == DEFAULT_COMPARABLE_SPEC_KEYS
        assert s.related.random_seed is None
        assert s.log_level == "INFO"

    def test_load_missing_file_uses_defaults(self, tmp_path: Path, clean_env):
        s = Settings.load(tmp_path / "nope.yaml")
        assert s == Settings()

    def test_load_yaml(self, tmp_path: Path, clean_env):
        path = tmp_path / "settings.yaml"
        path.write_text(
            "related:\n"
            "  target_count: 6\n"
            "  score_bucket_width: 10\n"
            "  comparable_spec_keys: [wattage]\n"
            "catalog:\n"
            "  catalog_path: /srv/catalog.json\n"
            "log_level: DEBUG\n",
            encoding="utf-8",
        )
        s = Settings.load(path)
        assert s.related.target_count == 6
        assert s.related.score_bucket_width == 10
        assert s.related.comparable_spec_keys == ["wattage"]
        assert s.catalog.catalog_abs_path == Path("/srv/catalog.json")
        assert s.log_level == "DEBUG"

    def test_empty_yaml(self, tmp_path: Path, clean_env):
        path = tmp_path / "settings.yaml"
        path.write_text("", encoding="utf-8")
        assert Settings.load(path).related.target_count == 4

    def test_env_overrides(self, tmp_path: Path, clean_env):
        clean_env.setenv("RELATED_TARGET_COUNT", "2")
        clean_env.setenv("RELATED_RANDOM_SEED", "99")
        clean_env.setenv("CATALOG_PATH", "data/other.json")
        clean_env.setenv("LOG_LEVEL", "WARNING")
        s = Settings.load(tmp_path / "nope.yaml")
        assert s.related.target_count == 2
        assert s.related.random_seed == 99
        assert s.catalog.catalog_path == "data/other.json"
        assert s.log_level == "WARNING"

    def test_relative_catalog_path_resolved_from_project_root(self, project_root: Path):
        s = CatalogSettings(catalog_path="data/products.json")
        assert s.catalog_abs_path == project_root / "data" / "products.json"

    def test_target_count_must_be_positive(self):
        with pytest.raises(ValidationError):
            RelatedProductsSettings(target_count=0)

    def test_bucket_width_must_be_positive(self):
        with pytest.raises(ValidationError):
            RelatedProductsSettings(score_bucket_width=0)


class TestLogging:
    def test_setup_logging(self):
        logger = setup_logging(logging.DEBUG, module_name="src")
        assert logger.name == "src"
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1

    def test_idempotent(self):
        setup_logging(module_name="src")
        logger = setup_logging("warning", module_name="src")
        assert len(logger.handlers) == 1
        assert logger.level == logging.WARNING
        assert logger.handlers[0].level == logging.WARNING

    def test_unknown_level(self):
        with pytest.raises(ValueError):
            setup_logging("LOUD", module_name="src")


class TestProductSpecs:
    def test_boolean_spec_stays_boolean(self):
        product = Product.model_validate(
            {"id": "X", "brand": "B", "category": "inverters", "specs": {"wattage": True, "mppt": False}}
        )
        assert product.specs["wattage"] is True
        assert product.specs["mppt"] is False

    def test_boolean_comparable_key_is_skipped(self):
        current = Product(id="A", brand="B", category="inverters", specs={"wattage": True})
        candidate = Product(id="C", brand="B", category="inverters", specs={"wattage": 1})
        assert similarity_score(current.specs, candidate.specs) == (0.0, [])
