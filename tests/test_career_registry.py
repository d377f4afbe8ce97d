"""Tests for the career registry."""

import pytest

from models.career import Career, CareerRegistry


def test_catalog_keeps_insertion_order(registry):
    assert registry.names() == [
        "Software Developer",
        "UI/UX Designer",
        "Data Analyst",
        "Cybersecurity Analyst",
    ]
    assert len(registry) == 4


def test_lookup_known_and_unknown(registry):
    career = registry.lookup("Data Analyst")
    assert career is not None
    assert career.salary_range == "₱25k - ₱90k per month"
    assert registry.lookup("Astronaut") is None
    assert "Astronaut" not in registry


def test_duplicate_names_are_rejected():
    registry = CareerRegistry([Career("Chef", "Cooks", "any")])
    with pytest.raises(ValueError):
        registry.add(Career("Chef", "Also cooks", "any"))


def test_reset_scores_zeroes_every_career(registry):
    for career in registry:
        career.score = -7
    registry.reset_scores()
    assert [c.score for c in registry.all()] == [0, 0, 0, 0]


def test_career_name_is_read_only():
    career = Career("Chef", "Cooks", "any")
    with pytest.raises(AttributeError):
        career.name = "Baker"


def test_all_returns_a_copy(registry):
    careers = registry.all()
    careers.clear()
    assert len(registry) == 4
