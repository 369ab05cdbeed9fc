"""
Tests for a full load → group → write run.
"""

import json

import pytest

from packages.common.config import Settings
from packages.domain.grouping.grouping_service import GroupingService
from packages.ingestion.listing_loader import FieldError, ShapeError


def test_process_sample_file(sample_file, workdir):
    service = GroupingService(Settings())

    categories = service.process_file("data01.json", "resultado.json")

    assert [c.category for c in categories] == [
        "Leite Integral Piracanjuba 1 L",
        "Arroz Branco Tio João 5kg",
        "Feijão Carioca 1kg",
        "Arroz Carioca Camil 1kg",
        "Leite Desnatado Italac 1 L",
    ]
    assert [c.count for c in categories] == [3, 2, 1, 1, 1]

    written = json.loads((workdir / "resultado.json").read_text(encoding="utf-8"))
    assert written == [c.model_dump() for c in categories]


def test_defaults_come_from_settings(write_json, workdir, monkeypatch):
    monkeypatch.setenv("CATEGORIZER_INPUT_FILE", "listings.json")
    monkeypatch.setenv("CATEGORIZER_OUTPUT_FILE", "groups.json")
    write_json("listings.json", [{"title": "Leite Integral Italac 1 L", "supermarket": "A"}])

    categories = GroupingService(Settings()).process_file()

    assert len(categories) == 1
    assert (workdir / "groups.json").exists()


def test_invalid_record_aborts_without_output(write_json, workdir):
    write_json("data01.json", [
        {"title": "Leite Integral Italac 1 L", "supermarket": "A"},
        {"title": 123, "supermarket": "B"},
    ])

    with pytest.raises(FieldError) as exc_info:
        GroupingService(Settings()).process_file("data01.json", "resultado.json")

    assert exc_info.value.index == 1
    assert not (workdir / "resultado.json").exists()


def test_non_array_input_aborts_without_output(write_json, workdir):
    write_json("data01.json", {"title": "Leite", "supermarket": "A"})

    with pytest.raises(ShapeError):
        GroupingService(Settings()).process_file("data01.json", "resultado.json")

    assert not (workdir / "resultado.json").exists()


def test_empty_input_writes_empty_array(write_json, workdir):
    write_json("data01.json", [])

    categories = GroupingService(Settings()).process_file("data01.json", "resultado.json")

    assert categories == []
    assert json.loads((workdir / "resultado.json").read_text(encoding="utf-8")) == []
