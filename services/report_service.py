# services/report_service.py
import glob
import logging
import os
import re
from datetime import datetime

from config import Config, REPORT_FILE_PREFIX

logger = logging.getLogger(__name__)

SEPARATOR = "--------------------------------"


class ReportService:
    """
    Plain-text career reports: rendering, saving and reading back history.
    """

    def __init__(self, reports_dir=None):
        self.reports_dir = reports_dir or Config.REPORTS_DIR

    def generate_report(self, result):
        lines = [
            "CAREER PATH REPORT",
            f"User: {result.user_name}",
            f"Date: {result.completed_at.strftime('%Y-%m-%d %H:%M:%S')}",
            SEPARATOR,
        ]

        top = result.top_recommendation
        if top:
            lines.append(f"Top Recommendation: {top.name}")
            lines.append(f"Potential Salary: {top.salary_range}")
            lines.append(SEPARATOR)

        lines.append("Full Breakdown:")
        for career in result.ranked:
            lines.append(f"- {career.name}: {career.score} points")
        lines.append(SEPARATOR)

        lines.append("Badges Earned:")
        for badge in result.badges:
            lines.append(f"* {badge}")

        return "\n".join(lines) + "\n"

    def report_filename(self, result):
        # keep user names from escaping the reports directory
        safe_name = re.sub(r'[^\w\-. ]', '_', result.user_name).strip() or Config.DEFAULT_USER_NAME
        return f"{REPORT_FILE_PREFIX}{safe_name}_{result.completed_at:%Y%m%d}.txt"

    def save_report(self, result):
        """Write the report and return its path. OSError propagates to the caller."""
        os.makedirs(self.reports_dir, exist_ok=True)
        path = os.path.join(self.reports_dir, self.report_filename(result))
        with open(path, 'w', encoding='utf-8') as f:
            f.write(self.generate_report(result))
        logger.info(f"Report saved to {path}")
        return path

    def list_reports(self):
        pattern = os.path.join(self.reports_dir, f"{REPORT_FILE_PREFIX}*.txt")
        return sorted(glob.glob(pattern))

    def read_report(self, path):
        with open(path, 'r', encoding='utf-8') as f:
            return f.read()

    @staticmethod
    def report_date(path):
        """Date encoded in a report file name, or None if it does not parse."""
        match = re.search(r'_(\d{8})\.txt$', os.path.basename(path))
        if not match:
            return None
        try:
            return datetime.strptime(match.group(1), '%Y%m%d').date()
        except ValueError:
            return None
