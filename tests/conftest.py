import json

import pytest

from config import Config
from models.assessment import AssessmentSession
from models.career import CareerRegistry
from models.question import questions_from_document
from questions.careers import CAREERS

# Two questions whose answers make the tie-breaker easy to trigger or avoid:
#   A, A -> Software Developer 10, Data Analyst 3        (no tie)
#   B, B -> UI/UX Designer 10, Software Developer 8      (tie)
SMALL_QUESTION_DOCUMENT = [
    {
        "text": "Pick one",
        "options": [
            {"text": "Code", "impact": {"Software Developer": 10}, "badgeAwarded": "Puzzle Master"},
            {"text": "Design", "impact": {"UI/UX Designer": 10, "Software Developer": 8}}
        ]
    },
    {
        "text": "Pick another",
        "options": [
            {"text": "Spreadsheets", "impact": {"Data Analyst": 3}},
            {"text": "Firewalls", "impact": {"Cybersecurity Analyst": 1}}
        ]
    }
]


@pytest.fixture
def registry():
    return CareerRegistry.from_catalog(CAREERS)


@pytest.fixture
def assessment(registry):
    return AssessmentSession(registry)


@pytest.fixture
def test_config(tmp_path):
    class TestConfig(Config):
        TESTING = True
        SECRET_KEY = 'test-secret'
        QUESTIONS_FILE_PATH = str(tmp_path / 'questions.json')
        REPORTS_DIR = str(tmp_path / 'reports')
        LOADING_BAR_DELAY = 0

    return TestConfig


@pytest.fixture
def small_questions_file(test_config):
    with open(test_config.QUESTIONS_FILE_PATH, 'w', encoding='utf-8') as f:
        json.dump(SMALL_QUESTION_DOCUMENT, f)
    return test_config.QUESTIONS_FILE_PATH


@pytest.fixture
def small_questions():
    return questions_from_document(SMALL_QUESTION_DOCUMENT)
