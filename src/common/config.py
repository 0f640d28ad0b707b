"""Project configuration and paths.

Loads settings from config/settings.yaml and environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

# === Paths ===
PROJECT_ROOT = Path(__file__).parent.parent.parent
CONFIG_DIR = PROJECT_ROOT / "config"
DATA_DIR = PROJECT_ROOT / "data"

# Load .env from project root
load_dotenv(PROJECT_ROOT / ".env")

DEFAULT_COMPARABLE_SPEC_KEYS = [
    "wattage",
    "capacity",
    "power",
    "output_power",
    "max_power",
]


class RelatedProductsSettings(BaseModel):
    """Settings for the related-products selector."""
    target_count: int = Field(default=4, ge=1)
    score_bucket_width: float = Field(default=5.0, gt=0)
    comparable_spec_keys: list[str] = Field(
        default_factory=lambda: list(DEFAULT_COMPARABLE_SPEC_KEYS)
    )
    random_seed: int | None = None


class CatalogSettings(BaseModel):
    """Where the static product catalog lives."""
    catalog_path: str = str(DATA_DIR / "products.json")

    @property
    def catalog_abs_path(self) -> Path:
        """Resolve catalog path relative to project root."""
        p = Path(self.catalog_path)
        if p.is_absolute():
            return p
        return PROJECT_ROOT / p


class Settings(BaseModel):
    """Top-level application settings."""
    related: RelatedProductsSettings = Field(default_factory=RelatedProductsSettings)
    catalog: CatalogSettings = Field(default_factory=CatalogSettings)
    log_level: str = "INFO"

    @classmethod
    def load(cls, path: str | Path | None = None) -> Settings:
        """Load settings from YAML (default config/settings.yaml), falling back to defaults.

        Environment variables override file values:
        RELATED_TARGET_COUNT, RELATED_RANDOM_SEED, CATALOG_PATH, LOG_LEVEL.
        """
        settings_path = Path(path) if path else CONFIG_DIR / "settings.yaml"
        data: dict = {}
        if settings_path.exists():
            with open(settings_path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}

        related = dict(data.get("related") or {})
        catalog = dict(data.get("catalog") or {})
        if count := os.getenv("RELATED_TARGET_COUNT"):
            related["target_count"] = int(count)
        if seed := os.getenv("RELATED_RANDOM_SEED"):
            related["random_seed"] = int(seed)
        if catalog_path := os.getenv("CATALOG_PATH"):
            catalog["catalog_path"] = catalog_path
        if level := os.getenv("LOG_LEVEL"):
            data["log_level"] = level

        data["related"] = related
        data["catalog"] = catalog
        return cls(**data)


# Singleton settings instance
settings = Settings.load()
