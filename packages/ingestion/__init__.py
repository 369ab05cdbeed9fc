"""
Input/output for categorization runs

Listings come in as a JSON array of {title, supermarket} objects and leave as
a JSON array of {category, count, products} objects.
"""

from packages.ingestion.listing_loader import (
    FieldError,
    ListingValidationError,
    ListingValidationResult,
    ShapeError,
    load_listings,
    validate_listings,
)
from packages.ingestion.category_writer import categories_to_json, write_categories

__all__ = [
    'FieldError',
    'ListingValidationError',
    'ListingValidationResult',
    'ShapeError',
    'load_listings',
    'validate_listings',
    'categories_to_json',
    'write_categories',
]
