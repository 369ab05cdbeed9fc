"""
Grouping Engine - folds listings into categories keyed by signature

Flow:
1. Compute the signature of each listing, in input order
2. First listing with a new signature opens a category named after its raw title
3. Later listings with the same signature are appended to that category

Categories are emitted in the order their signature was first seen, and
products keep their input order inside each category. Categories are never
merged or split once created.
"""
from dataclasses import dataclass, field
from typing import Iterable, List

import structlog

from packages.common.schemas.product_listing import (
    CategoryOutput,
    ProductEntry,
    ProductRecord,
)
from packages.domain.grouping.signature_extractor import extract_signature

logger = structlog.get_logger()


@dataclass
class CategoryGroup:
    """
    Listings sharing one signature.

    Attributes:
        signature: Grouping key
        category_name: Raw title of the first listing with this signature
        products: Listings in input order
    """
    signature: str
    category_name: str
    products: List[ProductEntry] = field(default_factory=list)

    def to_output(self) -> CategoryOutput:
        return CategoryOutput(
            category=self.category_name,
            count=len(self.products),
            products=list(self.products),
        )


class GroupingEngine:
    """
    Accumulates listings into signature groups.

    Usage:
        engine = GroupingEngine()
        for record in records:
            engine.add(record)
        result = engine.render()
    """

    def __init__(self):
        # dict keeps first-seen order of signatures
        self._groups: dict[str, CategoryGroup] = {}

    def add(self, record: ProductRecord) -> CategoryGroup:
        """
        Add one listing and return the group it landed in.

        Args:
            record: Validated listing

        Returns:
            The (possibly new) CategoryGroup for the listing's signature
        """
        signature = extract_signature(record.title)

        group = self._groups.get(signature)
        if group is None:
            group = CategoryGroup(signature=signature, category_name=record.title)
            self._groups[signature] = group
            logger.debug("category_created", signature=signature, category=record.title)

        group.products.append(
            ProductEntry(title=record.title, supermarket=record.supermarket)
        )
        return group

    def groups(self) -> List[CategoryGroup]:
        """Groups in first-seen order"""
        return list(self._groups.values())

    def render(self) -> List[CategoryOutput]:
        """Output form of every group, in first-seen order"""
        return [group.to_output() for group in self._groups.values()]


def group_products(records: Iterable[ProductRecord]) -> List[CategoryOutput]:
    """
    Group validated listings into categories.

    Args:
        records: Listings in input order

    Returns:
        One CategoryOutput per distinct signature, in first-seen order
    """
    engine = GroupingEngine()
    listing_count = 0
    for record in records:
        engine.add(record)
        listing_count += 1

    result = engine.render()

    logger.info("grouping_complete",
                listings=listing_count,
                categories=len(result))

    return result
