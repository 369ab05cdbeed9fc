"""
Tests for title normalization and unit standardization.
"""

import pytest

from packages.domain.grouping.normalizer import (
    normalize_title,
    standardize_unit,
    strip_accents,
)


def test_lowercases_and_strips_accents():
    assert normalize_title("Feijão Carioca") == "feijao carioca"
    assert normalize_title("CAFÉ Pilão") == "cafe pilao"
    assert strip_accents("açúcar") == "acucar"


def test_hyphens_and_whitespace_collapse_to_single_space():
    assert normalize_title("Leite Semi-Desnatado") == "leite semi desnatado"
    assert normalize_title("Arroz -- Branco") == "arroz branco"
    assert normalize_title("Leite\tIntegral\n1L") == "leite integral 1l"


def test_trims_leading_and_trailing_separators():
    assert normalize_title("  Leite   Integral  ") == "leite integral"
    assert normalize_title("-Arroz-") == "arroz"


@pytest.mark.parametrize("title", [
    "Leite Integral Piracanjuba 1L",
    "Feijão  Carioca - 1 Quilo",
    "  ARROZ Tio-João  5kg ",
    "Açúcar Refinado União",
])
def test_normalization_is_idempotent(title):
    once = normalize_title(title)
    assert normalize_title(once) == once


def test_standardize_unit_replaces_spelled_out_units():
    assert standardize_unit("1 litro") == "1 l"
    assert standardize_unit("1 Litro") == "1 l"
    assert standardize_unit("2 QUILO") == "2 kg"


def test_standardize_unit_replaces_first_occurrence_only():
    assert standardize_unit("1 litro litro") == "1 l litro"
    assert standardize_unit("1 litros") == "1 ls"


def test_standardize_unit_leaves_short_units_alone():
    assert standardize_unit("500 g") == "500 g"
    assert standardize_unit("1 l") == "1 l"
