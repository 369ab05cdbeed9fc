"""
Category Writer - serializes grouped categories to the result JSON file
"""
import json
from pathlib import Path
from typing import Iterable, List, Union

import structlog

from packages.common.schemas.product_listing import CategoryOutput

logger = structlog.get_logger()


def categories_to_json(categories: Iterable[CategoryOutput], indent: int = 2) -> str:
    """
    Render categories as a JSON array.

    Key order is category, count, products. Non-ASCII text is kept as-is.
    """
    payload: List[dict] = [category.model_dump() for category in categories]
    return json.dumps(payload, indent=indent, ensure_ascii=False)


def write_categories(
    path: Union[str, Path],
    categories: Iterable[CategoryOutput],
    indent: int = 2,
) -> Path:
    """
    Write categories to a UTF-8 JSON file, replacing any existing file.

    Args:
        path: Destination file
        categories: Grouped categories in output order
        indent: JSON indentation

    Returns:
        The path written
    """
    path = Path(path)
    categories = list(categories)
    path.write_text(categories_to_json(categories, indent=indent), encoding="utf-8")

    logger.info("categories_written", path=str(path), categories=len(categories))
    return path
