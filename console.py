# console.py - menu-driven front end for the assessment
import logging
import os
import sys
import textwrap
import time

from config import Config
from models.career import CareerRegistry
from questions.careers import CAREERS
from services.assessment_service import AssessmentService
from services.email_service import EmailService
from services.question_bank import QuestionBank
from services.report_service import ReportService

logger = logging.getLogger(__name__)

RULE = "  " + "-" * 50
BAR_WIDTH = 50
# score that fills the whole bar
BAR_FULL_SCORE = 130


def draw_bar(score, width=BAR_WIDTH, full_score=BAR_FULL_SCORE):
    filled = int(score / full_score * width)
    filled = max(0, min(width, filled))
    return "█" * filled + "─" * (width - filled)


class ConsoleApp:
    """
    Console presentation layer. All keyboard input goes through `input_func`
    so a session can be scripted.
    """

    def __init__(self, config=Config, input_func=input, sleep=time.sleep):
        self.config = config
        self.input = input_func
        self.sleep = sleep
        # last entered name; a blank answer on a later run reuses it
        self.user_name = None
        self.registry = CareerRegistry.from_catalog(CAREERS)
        self.report_service = ReportService(config.REPORTS_DIR)
        self.email_service = EmailService(self.report_service)
        self.assessment_service = AssessmentService(
            self.registry,
            question_bank=QuestionBank(config.QUESTIONS_FILE_PATH, notify=self.notice)
        )

    # -------------------------
    # Output helpers
    # -------------------------
    def notice(self, message):
        print(f"  {message}")

    def draw_header(self):
        print("=" * 50)
        print("       CAREER PATH DECISION SYSTEM v3.0           ")
        print("=" * 50)

    def show_loading_bar(self, message, ticks=20):
        sys.stdout.write(f"\n  {message} [")
        for _ in range(ticks):
            sys.stdout.write("█")
            sys.stdout.flush()
            self.sleep(self.config.LOADING_BAR_DELAY)
        sys.stdout.write("] Done.\n")

    # -------------------------
    # Main menu
    # -------------------------
    def run(self):
        while True:
            self.draw_header()
            print("\n  MAIN MENU")
            print("  1. Start New Assessment")
            print("  2. Load Previous Result (Historical Comparison)")
            print("  3. Admin Mode (God Mode)")
            print("  4. Exit")
            choice = self.input("\n  Select an option: ").strip()

            if choice == '1':
                self.run_assessment()
            elif choice == '2':
                self.load_previous_result()
            elif choice == '3':
                self.run_admin_mode()
            elif choice == '4':
                return

    def choose_option(self, question, number=None, total=None):
        """Numbered selection. A single-option question is answered without asking."""
        if len(question.options) == 1:
            return question.options[0]

        while True:
            print()
            if number is not None:
                print(f"  QUESTION {number} of {total}: {question.text}")
            else:
                print(f"  {question.text}")
            for index, option in enumerate(question.options, start=1):
                print(f"    {index}. {option.text}")

            raw = self.input("\n  Your choice: ").strip()
            if raw.isdigit() and 1 <= int(raw) <= len(question.options):
                return question.options[int(raw) - 1]
            print(f"  Please enter a number between 1 and {len(question.options)}.")

    # -------------------------
    # Assessment
    # -------------------------
    def run_assessment(self):
        self.draw_header()
        print("\n  We will analyze your personality, skills, and work style.")
        name = self.input("\n  Please enter your name: ").strip()
        if name:
            self.user_name = name
        session = self.assessment_service.begin(self.user_name)
        print(f"\n  Hello, {session.user_name}. Let's begin.")

        question = self.assessment_service.current_question(session)
        while question is not None:
            option = self.choose_option(question, session.position + 1, session.total_questions)
            self.assessment_service.answer(session, option)
            self.show_loading_bar("Processing...")
            question = self.assessment_service.current_question(session)

        tie_question = self.assessment_service.tie_breaker_question(session)
        if tie_question is not None:
            c1, c2 = session.tie_breaker_pair
            print("\n  ⚠ TIE DETECTED! SUDDEN DEATH ROUND ⚠")
            print(f"  It is too close to call between {c1.name} and {c2.name}.")
            self.assessment_service.answer_tie_breaker(session, self.choose_option(tie_question))

        result = self.assessment_service.finalize(session)
        self.display_dashboard(result)
        self.handle_post_assessment(result)
        return result

    def display_dashboard(self, result):
        self.draw_header()
        print(f"\n  ASSESSMENT COMPLETE FOR: {result.user_name.upper()}")
        print(RULE)

        top = result.top_recommendation
        if top:
            print(f"\n  ★ TOP RECOMMENDATION: {top.name.upper()} ★")
            print(f"  Salary Range: {top.salary_range}")
            print(textwrap.indent(textwrap.fill(top.description, 60), "  "))

        print("\n  MATCH ANALYSIS")
        print(RULE)
        for career in result.ranked:
            print(f"    {career.name}: {draw_bar(career.score)} {career.score}")

        if result.badges:
            print("\n  EARNED BADGES")
            print(RULE)
            print("  " + " ".join(f"[{badge}]" for badge in result.badges))

        print("\n  Thank you for using the Career Path Decision System!")

    def handle_post_assessment(self, result):
        print("\n  ACTIONS:")
        print("  [S] Save to File")
        print("  [E] Email Results")
        print("  [ENTER] Return to Menu")
        choice = self.input("\n  > ").strip().lower()

        if choice == 's':
            try:
                path = self.report_service.save_report(result)
                print(f"\n  [SUCCESS] Report saved to {path}")
            except OSError as e:
                logger.error(f"Saving report failed: {e}")
                print(f"  ✗ Could not save report: {e}")
        elif choice == 'e':
            address = self.input("\n  Enter your email address: ").strip()
            if not self.email_service.is_valid_address(address):
                print("  Invalid email.")
                return
            print(f"  Sending report to {address}...")
            self.show_loading_bar("Connecting to SMTP")
            self.email_service.send_report(address, result)
            print("  [SIMULATION] Email sent successfully!")

    # -------------------------
    # History
    # -------------------------
    def load_previous_result(self):
        self.draw_header()
        files = self.report_service.list_reports()
        if not files:
            print("\n  No history found.")
            return None

        print("\n  Select a file to load:")
        for index, path in enumerate(files, start=1):
            report_date = self.report_service.report_date(path)
            suffix = f"  ({report_date:%b %d, %Y})" if report_date else ""
            print(f"  {index}. {os.path.basename(path)}{suffix}")

        raw = self.input("\n  Choice: ").strip()
        if not (raw.isdigit() and 1 <= int(raw) <= len(files)):
            return None

        content = self.report_service.read_report(files[int(raw) - 1])
        print("\n  HISTORICAL REPORT")
        print("  -----------------")
        print(content)
        return content

    # -------------------------
    # Admin
    # -------------------------
    def run_admin_mode(self):
        password = self.input("\n  Enter Admin Password: ")
        if password != self.config.ADMIN_PASSWORD:
            print("  Access Denied.")
            return False

        scoring = self.assessment_service.scoring_service
        while True:
            print("\n  *** ADMIN / GOD MODE ***")
            print("  1. View Raw Career Stats")
            print(f"  2. Add Bonus Points to {self.config.ADMIN_BONUS_CAREER}")
            print("  3. Return to Main Menu")
            choice = self.input("  > ").strip()

            if choice == '1':
                for career in self.registry:
                    print(f"  - {career.name}: {career.score} pts")
            elif choice == '2':
                confirm = self.input(
                    f"\n  Add {self.config.ADMIN_BONUS_POINTS} pts to {self.config.ADMIN_BONUS_CAREER}? (Y/N) "
                )
                if confirm.strip().lower() == 'y':
                    if scoring.apply_bonus(self.registry, self.config.ADMIN_BONUS_CAREER,
                                           self.config.ADMIN_BONUS_POINTS):
                        print("  Updated.")
            elif choice == '3':
                return True
