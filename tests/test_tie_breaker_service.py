"""Tests for ranking and the sudden-death round."""

import pytest

from models.career import Career
from services.tie_breaker_service import TieBreakerService


@pytest.fixture
def service():
    return TieBreakerService()


def _set_scores(registry, **scores):
    names = {
        "dev": "Software Developer",
        "ux": "UI/UX Designer",
        "data": "Data Analyst",
        "sec": "Cybersecurity Analyst",
    }
    for key, value in scores.items():
        registry.lookup(names[key]).score = value


def test_rank_sorts_by_score_descending(service, assessment):
    _set_scores(assessment.registry, dev=5, ux=20, data=-3, sec=12)

    ranked = service.rank(assessment)

    assert [c.name for c in ranked] == [
        "UI/UX Designer", "Cybersecurity Analyst", "Software Developer", "Data Analyst"
    ]


def test_rank_keeps_registry_order_for_equal_scores(service, assessment):
    _set_scores(assessment.registry, dev=10, ux=3, data=10, sec=3)

    ranked = service.rank(assessment)

    assert [c.name for c in ranked] == [
        "Software Developer", "Data Analyst", "UI/UX Designer", "Cybersecurity Analyst"
    ]
    assert len(ranked) == len(assessment.registry)


@pytest.mark.parametrize("top,second,expected", [
    (30, 25, False),
    (30, 10, False),
    (30, 26, True),
    (30, 30, True),
    (0, 0, True),
])
def test_needs_tie_breaker_threshold(service, top, second, expected):
    ranked = [Career("A", "", "", top), Career("B", "", "", second)]
    assert service.needs_tie_breaker(ranked) is expected


def test_needs_tie_breaker_requires_two_entries(service):
    assert service.needs_tie_breaker([]) is False
    assert service.needs_tie_breaker([Career("A", "", "", 3)]) is False


def test_only_top_two_are_considered(service):
    ranked = [Career("A", "", "", 40), Career("B", "", "", 30), Career("C", "", "", 30)]
    assert service.needs_tie_breaker(ranked) is False


def test_build_tie_breaker_question(service, registry):
    dev = registry.lookup("Software Developer")
    data = registry.lookup("Data Analyst")

    question = service.build_tie_breaker_question(dev, data)

    assert len(question.options) == 2
    first, second = question.options
    assert "Software Developer" in first.text
    assert first.impact == {"Software Developer": 10, "Data Analyst": -5}
    assert "Data Analyst" in second.text
    assert second.impact == {"Data Analyst": 10, "Software Developer": -5}
    assert first.badge_awarded is None and second.badge_awarded is None


@pytest.mark.parametrize("choice,expected_dev,expected_ux", [
    (0, 60, 43),
    (1, 45, 58),
])
def test_resolve_tie_breaker(service, assessment, choice, expected_dev, expected_ux):
    _set_scores(assessment.registry, dev=50, ux=48)
    dev = assessment.registry.lookup("Software Developer")
    ux = assessment.registry.lookup("UI/UX Designer")
    asked = []

    def choose(question):
        asked.append(question)
        return question.options[choice]

    service.resolve_tie_breaker(assessment, dev, ux, choose)

    assert len(asked) == 1
    assert dev.score == expected_dev
    assert ux.score == expected_ux
    assert assessment.earned_badges == []
