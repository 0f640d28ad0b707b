"""CLI entry point for the related-products selector.

Usage:
    python -m src.related_products.main --product-id SP-001
    python -m src.related_products.main --catalog data/products.json --product-id SP-001 --seed 7
    python -m src.related_products.main --product-id INV-003 --extra db_products.json --output related.json
"""

from __future__ import annotations

import argparse
import json
import logging
import random
import sys

from ..common.config import RelatedProductsSettings, settings
from ..common.logging import setup_logging
from .catalog import ProductCatalog
from .errors import CatalogError, ProductNotFoundError
from .service import RelatedProductsService

logger = logging.getLogger(__name__)


def _load_catalog(args: argparse.Namespace) -> ProductCatalog:
    catalog_path = args.catalog or settings.catalog.catalog_abs_path
    catalog = ProductCatalog.from_json(catalog_path)
    if args.extra:
        with open(args.extra, encoding="utf-8") as f:
            try:
                extra = json.load(f)
            except json.JSONDecodeError as e:
                raise CatalogError(f"Extra products file {args.extra} is not valid JSON: {e}") from e
        if not isinstance(extra, list):
            raise CatalogError(f"Extra products file {args.extra} must contain a JSON list")
        catalog = catalog.merge(extra)
    return catalog


def run(args: argparse.Namespace) -> dict:
    """Select related products for ``args.product_id`` and return the result dict."""
    related_settings = settings.related
    if args.limit is not None:
        related_settings = RelatedProductsSettings(
            **{**related_settings.model_dump(), "target_count": args.limit}
        )

    seed = args.seed if args.seed is not None else related_settings.random_seed
    rng = random.Random(seed) if seed is not None else None

    catalog = _load_catalog(args)
    service = RelatedProductsService(catalog, related_settings, rng=rng)
    result = service.select_for(args.product_id)

    logger.info("=== Related Products: %s ===", result.product_id)
    for i, p in enumerate(result.related, 1):
        logger.info("  #%d: %s (%s, %s)", i, p.id, p.brand, p.category)

    return result.to_dict()


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Select related products for a catalog product"
    )
    parser.add_argument(
        "--catalog",
        type=str,
        help="Catalog JSON file (default: catalog.catalog_path from settings)",
    )
    parser.add_argument(
        "--product-id",
        type=str,
        required=True,
        help="Id of the product being viewed (e.g., 'SP-001')",
    )
    parser.add_argument(
        "--extra",
        type=str,
        help="JSON list of additional products (e.g., exported database rows)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for reproducible tie-breaking",
    )
    parser.add_argument(
        "--limit",
        type=int,
        help="Maximum number of related products (default: 4)",
    )
    parser.add_argument(
        "--output",
        type=str,
        help="Output JSON file path (default: stdout)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args(argv)
    # Logs go to stderr so stdout stays valid JSON
    setup_logging(logging.DEBUG if args.verbose else settings.log_level, stream=sys.stderr)

    if args.limit is not None and args.limit < 1:
        raise SystemExit("Error: --limit must be at least 1")

    try:
        output = run(args)
    except (ProductNotFoundError, CatalogError, OSError) as e:
        raise SystemExit(f"Error: {e}") from e

    text = json.dumps(output, ensure_ascii=False, indent=2)
    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(text)
        logger.info("Output written to %s", args.output)
    else:
        print(text)


if __name__ == "__main__":
    main()
