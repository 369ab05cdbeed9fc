"""
Signature Extractor - reduces a listing title to a canonical product key

A signature has four slots, always joined by "-" (empty slots stay empty):

    <base product>-<brand>-<type>-<size>

Examples:
- "Leite Integral Piracanjuba 1 L" → "leite-piracanjuba-integral-1 l"
- "Feijão Carioca 1kg"             → "feijao--carioca-1kg"
- "Arroz Branco Tio João 5kg"      → "arroz-tio joao-branco-5kg"

Listings with identical signatures are treated as the same product.
"""
import re
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

import structlog

from packages.domain.grouping.normalizer import normalize_title, standardize_unit
from packages.domain.grouping.vocabulary import (
    BASE_PRODUCTS,
    BRANDS,
    PRODUCT_TYPES,
    SIZE_UNITS,
    SIZE_UNIT_PREFIXES,
)

logger = structlog.get_logger()

SIGNATURE_DELIMITER = "-"

_BARE_NUMBER = re.compile(r"^\d+$")
_NUMBER_WITH_UNIT = re.compile(r"\d+(l|kg|g|ml)")


@dataclass(frozen=True)
class ProductSignature:
    """
    The four slots of a signature.

    Attributes:
        base_product: Base product word (e.g. "leite") or ""
        brand: Brand name (e.g. "tio joao") or ""
        product_type: Type/variant (e.g. "integral") or ""
        size: Quantity with unit (e.g. "1 l", "500ml") or ""
    """
    base_product: str = ""
    brand: str = ""
    product_type: str = ""
    size: str = ""

    @property
    def key(self) -> str:
        """Signature string used as the grouping key"""
        return SIGNATURE_DELIMITER.join(
            (self.base_product, self.brand, self.product_type, self.size)
        )


def find_base_product(words: Sequence[str]) -> str:
    """First word that is a known base product, token-exact."""
    for word in words:
        if word in BASE_PRODUCTS:
            return word
    return ""


def find_in_vocabulary(normalized: str, vocabulary: Iterable[str]) -> str:
    """
    First vocabulary entry (in vocabulary order) contained in the text.

    Substring matching lets multi-word entries like "tio joao" match.
    """
    for entry in vocabulary:
        if entry in normalized:
            return entry
    return ""


def _is_unit_word(word: str) -> bool:
    return word in SIZE_UNITS or word.startswith(SIZE_UNIT_PREFIXES)


def _find_separated_size(words: Sequence[str]) -> Optional[str]:
    """Quantity and unit as two words: "1 l", "5 kg", "1 litro"."""
    for i, word in enumerate(words[:-1]):
        if _BARE_NUMBER.match(word) and _is_unit_word(words[i + 1]):
            return standardize_unit(f"{word} {words[i + 1]}")
    return None


def _find_joined_size(words: Sequence[str]) -> Optional[str]:
    """Quantity glued to its unit: "500ml", "1kg". Returned verbatim."""
    for word in words:
        if _NUMBER_WITH_UNIT.search(word):
            return word
    return None


def find_size(words: Sequence[str]) -> str:
    """
    Extract the size slot.

    The separated form ("500 g") is preferred; the joined form ("500g") is
    only looked for when no separated size exists. A number that is not
    followed by a unit gives no size.

    Args:
        words: Normalized title split on spaces

    Returns:
        Size text or "" if none found
    """
    size = _find_separated_size(words)
    if size is None:
        size = _find_joined_size(words)
    return size or ""


def extract_signature_parts(title: str) -> ProductSignature:
    """
    Build the signature slots for a raw listing title.

    Args:
        title: Raw title (non-empty)

    Returns:
        ProductSignature with every slot filled or ""
    """
    normalized = normalize_title(title)
    words = normalized.split(" ")

    signature = ProductSignature(
        base_product=find_base_product(words),
        brand=find_in_vocabulary(normalized, BRANDS),
        product_type=find_in_vocabulary(normalized, PRODUCT_TYPES),
        size=find_size(words),
    )

    logger.debug("signature_extracted",
                 title=title,
                 normalized=normalized,
                 signature=signature.key)

    return signature


def extract_signature(title: str) -> str:
    """Signature key for a raw listing title."""
    return extract_signature_parts(title).key
