"""
Listing Loader - reads and validates the input listings file

The input must be a JSON array of objects, each with non-empty string
"title" and "supermarket" fields. Every record is validated before any
grouping happens; the first invalid record aborts the run.

validate_listings() returns an explicit result instead of raising, so callers
can decide how to surface the error. load_listings() is the raising form used
by the grouping service.
"""
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Optional, Union

import structlog
from pydantic import ValidationError

from packages.common.schemas.product_listing import ProductRecord

logger = structlog.get_logger()

REQUIRED_FIELDS = ("title", "supermarket")


class ListingValidationError(ValueError):
    """Base class for input listing validation failures"""
    pass


class ShapeError(ListingValidationError):
    """Raised when the input is not a list of listings"""

    def __init__(self, actual_type: str):
        self.actual_type = actual_type
        super().__init__(f"Input must be an array of products, got {actual_type}")


class FieldError(ListingValidationError):
    """Raised when a listing is missing a field or the field is not a non-empty string"""

    def __init__(self, index: int, field_name: str):
        self.index = index
        self.field_name = field_name
        super().__init__(f'Product at position {index} does not have a valid "{field_name}"')


@dataclass
class ListingValidationResult:
    """
    Outcome of validating raw input.

    Exactly one of `records` (non-empty or not) and `error` is meaningful:
    when `error` is set, `records` is empty.
    """
    records: List[ProductRecord] = field(default_factory=list)
    error: Optional[ListingValidationError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> List[ProductRecord]:
        """Return the records or raise the validation error"""
        if self.error is not None:
            raise self.error
        return self.records


def _invalid_field(index: int, exc: ValidationError) -> FieldError:
    # Fields are validated in declaration order, so the first error is the one to report
    for error in exc.errors():
        loc = error.get("loc") or ()
        if loc and loc[0] in REQUIRED_FIELDS:
            return FieldError(index, loc[0])
    return FieldError(index, REQUIRED_FIELDS[0])


def validate_listings(data: Any) -> ListingValidationResult:
    """
    Validate decoded JSON input.

    Args:
        data: Decoded JSON document

    Returns:
        ListingValidationResult with validated records, or the first error
    """
    if not isinstance(data, list):
        error = ShapeError(type(data).__name__)
        logger.error("listing_validation_failed", error=str(error))
        return ListingValidationResult(error=error)

    records: List[ProductRecord] = []
    for index, item in enumerate(data):
        if not isinstance(item, dict):
            error = FieldError(index, REQUIRED_FIELDS[0])
            logger.error("listing_validation_failed", index=index, error=str(error))
            return ListingValidationResult(error=error)

        try:
            records.append(ProductRecord.model_validate(item))
        except ValidationError as e:
            error = _invalid_field(index, e)
            logger.error("listing_validation_failed",
                         index=index,
                         field=error.field_name,
                         error=str(error))
            return ListingValidationResult(error=error)

    logger.info("listing_validation_complete", record_count=len(records))
    return ListingValidationResult(records=records)


def load_listings(path: Union[str, Path]) -> List[ProductRecord]:
    """
    Read and validate a listings file.

    Args:
        path: Path to a UTF-8 JSON file

    Returns:
        Validated records in file order

    Raises:
        FileNotFoundError: If the file doesn't exist
        json.JSONDecodeError: If the file is not valid JSON
        ShapeError: If the document is not an array
        FieldError: If a record is invalid
    """
    path = Path(path)
    logger.info("listing_load_started", path=str(path))

    with path.open("r", encoding="utf-8") as f:
        data = json.load(f)

    return validate_listings(data).unwrap()
