# services/assessment_service.py
import logging

from models.assessment import AssessmentResult, AssessmentSession, AssessmentState
from services.question_bank import QuestionBank
from services.scoring_service import ScoringService
from services.tie_breaker_service import TieBreakerService

logger = logging.getLogger(__name__)


class AssessmentService:
    """
    Drives one assessment: questions -> scoring -> ranking -> optional
    sudden-death round -> result snapshot.

    Front ends either hand `run()` a `choose_option(question) -> Option`
    callback, or walk the steps themselves:

        session = service.begin(name)
        q = service.current_question(session)
        while q is not None:
            service.answer(session, pick(q))
            q = service.current_question(session)
        tie = service.tie_breaker_question(session)
        if tie:
            service.answer_tie_breaker(session, pick(tie))
        result = service.finalize(session)
    """

    def __init__(self, registry, question_bank=None, scoring_service=None, tie_breaker_service=None):
        self.registry = registry
        self.question_bank = question_bank or QuestionBank()
        self.scoring_service = scoring_service or ScoringService()
        self.tie_breaker_service = tie_breaker_service or TieBreakerService(self.scoring_service)

    # -------------------------
    # Step-wise API
    # -------------------------
    def begin(self, user_name=None, questions=None):
        """Reset scores and badges and start asking `questions` (loaded from the bank if None)."""
        session = AssessmentSession(self.registry, user_name)
        session.reset()
        session.questions = list(questions) if questions is not None else self.question_bank.load()
        session.state = AssessmentState.ASKING_QUESTIONS
        if not session.questions:
            self._rank(session)
        return session

    def current_question(self, session):
        if session.state != AssessmentState.ASKING_QUESTIONS:
            return None
        return session.questions[session.position]

    def answer(self, session, option):
        session.require_state(AssessmentState.ASKING_QUESTIONS)
        self.scoring_service.apply_score(session, option)
        session.position += 1
        if session.position >= session.total_questions:
            self._rank(session)

    def tie_breaker_question(self, session):
        """
        The sudden-death question if the top two are too close, else None.
        Only offered once per assessment.
        """
        session.require_state(AssessmentState.RANKED, AssessmentState.TIE_BREAK)
        if session.state == AssessmentState.TIE_BREAK:
            c1, c2 = session.tie_breaker_pair
            return self.tie_breaker_service.build_tie_breaker_question(c1, c2)
        if session.tie_breaker_used or not self.tie_breaker_service.needs_tie_breaker(session.ranking):
            return None

        c1, c2 = session.ranking[0], session.ranking[1]
        session.tie_breaker_pair = (c1, c2)
        session.state = AssessmentState.TIE_BREAK
        logger.info(f"Tie detected between {c1.name} ({c1.score}) and {c2.name} ({c2.score})")
        return self.tie_breaker_service.build_tie_breaker_question(c1, c2)

    def answer_tie_breaker(self, session, option):
        session.require_state(AssessmentState.TIE_BREAK)
        self.scoring_service.apply_score(session, option)
        session.tie_breaker_used = True
        self._rank(session)

    def finalize(self, session):
        session.require_state(AssessmentState.RANKED, AssessmentState.FINALIZED)
        session.state = AssessmentState.FINALIZED
        result = AssessmentResult.from_session(session)
        top = result.top_recommendation
        logger.info(
            f"Assessment finished for {result.user_name}: "
            f"{top.name if top else 'no careers'} (badges: {len(result.badges)})"
        )
        return result

    # -------------------------
    # Callback-driven run
    # -------------------------
    def run(self, choose_option, user_name=None, questions=None):
        session = self.begin(user_name, questions)

        question = self.current_question(session)
        while question is not None:
            self.answer(session, choose_option(question))
            question = self.current_question(session)

        if self.tie_breaker_service.needs_tie_breaker(session.ranking):
            c1, c2 = session.ranking[0], session.ranking[1]
            session.tie_breaker_pair = (c1, c2)
            session.state = AssessmentState.TIE_BREAK
            self.tie_breaker_service.resolve_tie_breaker(session, c1, c2, choose_option)
            session.tie_breaker_used = True
            self._rank(session)

        return self.finalize(session)

    def _rank(self, session):
        session.ranking = self.tie_breaker_service.rank(session)
        session.state = AssessmentState.RANKED
