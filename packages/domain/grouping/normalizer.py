"""
Title Normalizer - canonical text form for supermarket listing titles

Examples:
- "Feijão  Carioca" → "feijao carioca"
- "Leite Semi-Desnatado" → "leite semi desnatado"
- "1 Litro" → standardize_unit → "1 l"
"""
import re
import unicodedata

_SEPARATOR_RUN = re.compile(r"[-\s]+")
_LITRO = re.compile(r"litro", re.IGNORECASE)
_QUILO = re.compile(r"quilo", re.IGNORECASE)


def strip_accents(text: str) -> str:
    """Decompose to NFD and drop combining marks ("café" → "cafe")."""
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def normalize_title(title: str) -> str:
    """
    Normalize a product title for matching.

    Steps, in order:
    1. Lowercase
    2. Strip accents
    3. Collapse runs of hyphens/whitespace into a single space
    4. Trim

    Args:
        title: Raw listing title (non-empty)

    Returns:
        Normalized title
    """
    text = strip_accents(title.lower())
    return _SEPARATOR_RUN.sub(" ", text).strip()


def standardize_unit(size: str) -> str:
    """
    Shorten spelled-out units in a size fragment.

    Only the first "litro" and the first "quilo" are replaced, case-insensitively.
    Size fragments are short ("1 litro"), never whole titles.
    """
    size = _LITRO.sub("l", size, count=1)
    return _QUILO.sub("kg", size, count=1)
