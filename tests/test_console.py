"""Tests for the console front end with scripted input."""

import os

import pytest

from console import ConsoleApp, draw_bar
from models.question import Option, Question


def scripted_input(*answers):
    remaining = list(answers)

    def _input(prompt=""):
        return remaining.pop(0)

    return _input


def make_app(config, *answers):
    return ConsoleApp(config, input_func=scripted_input(*answers), sleep=lambda seconds: None)


def test_full_assessment_and_save(test_config, small_questions_file):
    app = make_app(test_config, "Ana", "1", "1", "s")

    result = app.run_assessment()

    assert result.top_recommendation.name == "Software Developer"
    saved = os.listdir(test_config.REPORTS_DIR)
    assert len(saved) == 1
    assert saved[0].startswith("CareerPath_Ana_")


def test_tie_breaker_round_is_played(test_config, small_questions_file, capsys):
    app = make_app(test_config, "", "2", "2", "2", "")

    result = app.run_assessment()

    assert "SUDDEN DEATH" in capsys.readouterr().out
    assert result.tie_breaker_used is True
    assert result.user_name == "Guest"
    assert result.top_recommendation.name == "Software Developer"


def test_blank_name_reuses_previous_name(test_config, small_questions_file):
    app = make_app(test_config, "Ana", "1", "1", "", "", "1", "1", "")

    first = app.run_assessment()
    second = app.run_assessment()

    assert first.user_name == "Ana"
    assert second.user_name == "Ana"


def test_history_shows_saved_report(test_config, small_questions_file):
    make_app(test_config, "Ana", "1", "1", "s").run_assessment()

    content = make_app(test_config, "1").load_previous_result()

    assert content.startswith("CAREER PATH REPORT")
    assert "User: Ana" in content


def test_history_empty(test_config, capsys):
    assert make_app(test_config).load_previous_result() is None
    assert "No history found" in capsys.readouterr().out


def test_choose_option_retries_invalid_input(test_config):
    app = make_app(test_config, "9", "abc", "2")
    question = Question("Q", [Option("a", {}), Option("b", {})])

    assert app.choose_option(question, 1, 1).text == "b"


def test_single_option_is_auto_selected(test_config):
    def no_input(prompt=""):
        raise AssertionError("should not ask")

    app = ConsoleApp(test_config, input_func=no_input, sleep=lambda seconds: None)
    only = Option("only", {"Data Analyst": 1})

    assert app.choose_option(Question("Q", [only])) is only


def test_admin_mode_requires_password(test_config):
    assert make_app(test_config, "0000").run_admin_mode() is False


def test_admin_mode_adds_bonus(test_config):
    app = make_app(test_config, "1234", "2", "y", "1", "3")

    assert app.run_admin_mode() is True
    assert app.registry.lookup("Software Developer").score == 50


def test_email_action(test_config, small_questions_file, capsys):
    make_app(test_config, "Ana", "1", "1", "e", "ana@example.com").run_assessment()
    assert "Email sent successfully" in capsys.readouterr().out


def test_menu_exit(test_config):
    make_app(test_config, "7", "4").run()


@pytest.mark.parametrize("score,filled", [(0, 0), (-20, 0), (65, 25), (130, 50), (500, 50)])
def test_draw_bar(score, filled):
    bar = draw_bar(score)
    assert len(bar) == 50
    assert bar.count("█") == filled
