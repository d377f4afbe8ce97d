"""Tests for text reports, history files and the simulated email."""

import os
from datetime import date, datetime

import pytest

from models.assessment import AssessmentResult, CareerResult
from services.email_service import EmailService
from services.report_service import ReportService


def make_result(user_name="Ana", badges=("Sorter", "Guardian")):
    return AssessmentResult(
        user_name=user_name,
        ranked=(
            CareerResult("Data Analyst", "₱25k - ₱90k per month", "Patterns.", 42),
            CareerResult("Software Developer", "₱30k - ₱150k per month", "Logic.", 30),
            CareerResult("UI/UX Designer", "₱25k - ₱100k per month", "Design.", -5),
        ),
        badges=badges,
        completed_at=datetime(2026, 10, 18, 9, 30),
    )


@pytest.fixture
def reports(tmp_path):
    return ReportService(str(tmp_path / "reports"))


def test_generate_report_layout(reports):
    text = reports.generate_report(make_result())
    lines = text.splitlines()

    assert lines[0] == "CAREER PATH REPORT"
    assert lines[1] == "User: Ana"
    assert lines[2] == "Date: 2026-10-18 09:30:00"
    assert "Top Recommendation: Data Analyst" in lines
    assert "Potential Salary: ₱25k - ₱90k per month" in lines
    breakdown = lines.index("Full Breakdown:")
    assert lines[breakdown + 1:breakdown + 4] == [
        "- Data Analyst: 42 points",
        "- Software Developer: 30 points",
        "- UI/UX Designer: -5 points",
    ]
    assert lines[-2:] == ["* Sorter", "* Guardian"]


def test_report_without_badges(reports):
    text = reports.generate_report(make_result(badges=()))
    assert text.rstrip().endswith("Badges Earned:")


def test_save_list_and_read_reports(reports):
    path = reports.save_report(make_result())

    assert os.path.basename(path) == "CareerPath_Ana_20261018.txt"
    assert reports.list_reports() == [path]
    assert reports.read_report(path) == reports.generate_report(make_result())
    assert ReportService.report_date(path) == date(2026, 10, 18)


def test_unsafe_user_names_stay_in_reports_dir(reports):
    path = reports.save_report(make_result(user_name="../../etc/passwd"))

    assert os.path.dirname(path) == reports.reports_dir
    assert "/" not in os.path.basename(path)


def test_list_reports_ignores_other_files(reports, tmp_path):
    reports.save_report(make_result(user_name="Zed"))
    reports.save_report(make_result(user_name="Ana"))
    with open(os.path.join(reports.reports_dir, "notes.txt"), "w") as f:
        f.write("not a report")

    names = [os.path.basename(p) for p in reports.list_reports()]

    assert names == ["CareerPath_Ana_20261018.txt", "CareerPath_Zed_20261018.txt"]


def test_report_date_for_odd_names():
    assert ReportService.report_date("CareerPath_Ana.txt") is None
    assert ReportService.report_date("CareerPath_Ana_20261399.txt") is None


@pytest.mark.parametrize("address,accepted", [
    ("ana@example.com", True),
    ("", False),
    ("   ", False),
    (None, False),
    ("ana.example.com", False),
])
def test_email_simulation(address, accepted):
    assert EmailService().send_report(address, make_result()) is accepted
