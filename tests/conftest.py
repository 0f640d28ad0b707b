"""Shared test fixtures for the related-products engine."""

import logging
import random
import sys
from pathlib import Path

import pytest

# Ensure src is importable
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from src.common.models import Product
from src.related_products.catalog import ProductCatalog


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the test fixtures directory."""
    return PROJECT_ROOT / "tests" / "fixtures"


@pytest.fixture
def catalog_path(fixtures_dir: Path) -> Path:
    """Return the category-keyed sample catalog file."""
    return fixtures_dir / "products.json"


@pytest.fixture
def catalog(catalog_path: Path) -> ProductCatalog:
    """Provide the sample catalog loaded from JSON."""
    return ProductCatalog.from_json(catalog_path)


@pytest.fixture
def rng() -> random.Random:
    """Provide a seeded random source for reproducible tie-breaking."""
    return random.Random(1234)


@pytest.fixture
def sample_product_data() -> dict:
    """Return a sample catalog record as stored in products.json."""
    return {
        "id": "SP-SAMPLE-001",
        "name": "600W Bifacial Solar Panel",
        "brand": "Trina Solar",
        "category": "solar-panels",
        "price": 525,
        "image": "https://example.com/panel.jpg",
        "description": "Bifacial module for ground-mounted systems.",
        "specs": {
            "wattage": "600",
            "efficiency": "21.8%",
            "voltage": "42.1V",
            "warranty": "25 years",
        },
        "featured": False,
        "media": [],
    }


@pytest.fixture
def sample_product(sample_product_data: dict) -> Product:
    return Product(**sample_product_data)


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Drop handlers added by setup_logging so each test starts clean."""
    yield
    logger = logging.getLogger("src")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
