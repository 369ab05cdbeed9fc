"""
Grouping Module - signature-based grouping of supermarket listings

Three-stage process:
1. Normalization: lowercase, strip accents, collapse hyphens/spaces
2. Signature extraction: base product, brand, type and size from fixed vocabularies
3. Grouping: listings with identical signatures share one category

Example flow:
- "Leite Integral Piracanjuba 1 L"   → "leite-piracanjuba-integral-1 l"
- "leite integral piracanjuba 1 l"   → "leite-piracanjuba-integral-1 l"
  (Same signature → same category, named after the first title)
- "Leite Desnatado Italac 1 L"       → "leite-italac-desnatado-1 l"
  (Different brand and type → separate category)
"""

from packages.domain.grouping.grouping_engine import (
    CategoryGroup,
    GroupingEngine,
    group_products,
)
from packages.domain.grouping.normalizer import normalize_title, standardize_unit
from packages.domain.grouping.signature_extractor import (
    ProductSignature,
    extract_signature,
    extract_signature_parts,
)

__all__ = [
    'CategoryGroup',
    'GroupingEngine',
    'group_products',
    'normalize_title',
    'standardize_unit',
    'ProductSignature',
    'extract_signature',
    'extract_signature_parts',
]
