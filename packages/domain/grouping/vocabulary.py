"""
Fixed vocabularies used to build product signatures.

All entries are stored already normalized (lowercase, no accents, single
spaces) because they are matched against normalized titles.

Order matters for BRANDS and PRODUCT_TYPES: the first entry found in a title
wins, so "desnatado" is listed before "semi desnatado" and a
"semi desnatado" title resolves to "desnatado".
"""

# Matched token-exact against the title words
BASE_PRODUCTS: frozenset[str] = frozenset({
    "leite",
    "arroz",
    "feijao",
})

# Matched as substrings of the normalized title, in declared order
BRANDS: tuple[str, ...] = (
    "piracanjuba",
    "italac",
    "parmalat",
    "tio joao",
    "camil",
)

PRODUCT_TYPES: tuple[str, ...] = (
    "integral",
    "desnatado",
    "semi desnatado",
    "branco",
    "carioca",
)

# Unit tokens accepted after a bare quantity ("1 l", "500 g")
SIZE_UNITS: frozenset[str] = frozenset({"l", "kg", "g", "ml"})

# Unit tokens that also qualify by prefix ("litro", "litros", "kgs")
SIZE_UNIT_PREFIXES: tuple[str, ...] = ("l", "kg")
