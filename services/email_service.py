# services/email_service.py
import logging

from services.report_service import ReportService

logger = logging.getLogger(__name__)


class EmailService:
    """
    Simulated email delivery of a career report.
    Nothing leaves the machine; the send is only logged.
    """

    SUBJECT = "Your Career Path Results"

    def __init__(self, report_service=None):
        self.report_service = report_service or ReportService()

    @staticmethod
    def is_valid_address(address):
        return bool(address and address.strip()) and '@' in address

    def send_report(self, address, result):
        if not self.is_valid_address(address):
            logger.warning(f"Rejected email address: {address!r}")
            return False

        body = self.report_service.generate_report(result)
        logger.info(
            f"[SIMULATION] Email to {address.strip()} | subject: {self.SUBJECT} | {len(body)} chars"
        )
        return True
