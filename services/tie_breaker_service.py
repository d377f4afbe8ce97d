# services/tie_breaker_service.py
import logging

from models.question import Option, Question
from services.scoring_service import ScoringService

logger = logging.getLogger(__name__)

# A gap smaller than this between first and second place triggers sudden death.
TIE_BREAKER_THRESHOLD = 5
TIE_BREAKER_REWARD = 10
TIE_BREAKER_PENALTY = -5

TIE_BREAKER_QUESTION_TEXT = "If you had to choose one path right now, which appeals more?"


class TieBreakerService:
    """
    Ranking of careers and the one-shot sudden-death question.
    """

    def __init__(self, scoring_service=None):
        self.scoring_service = scoring_service or ScoringService()

    # -------------------------
    # Ranking
    # -------------------------
    def rank(self, session):
        """
        Careers sorted by score, highest first.
        sorted() is stable, so equal scores keep registry order.
        """
        return sorted(session.registry.all(), key=lambda career: career.score, reverse=True)

    # -------------------------
    # Tie-breaker logic
    # -------------------------
    def needs_tie_breaker(self, ranked):
        """
        True if the top two entries of `ranked` are less than
        TIE_BREAKER_THRESHOLD points apart.
        """
        if len(ranked) < 2:
            return False
        return ranked[0].score - ranked[1].score < TIE_BREAKER_THRESHOLD

    def build_tie_breaker_question(self, c1, c2):
        """Two options, one per contender: winner +10, other -5. No badges."""
        return Question(
            TIE_BREAKER_QUESTION_TEXT,
            [
                Option(
                    f"Focus on {c1.name} tasks",
                    {c1.name: TIE_BREAKER_REWARD, c2.name: TIE_BREAKER_PENALTY}
                ),
                Option(
                    f"Focus on {c2.name} tasks",
                    {c2.name: TIE_BREAKER_REWARD, c1.name: TIE_BREAKER_PENALTY}
                )
            ]
        )

    def resolve_tie_breaker(self, session, c1, c2, choose_option):
        """
        Ask the sudden-death question through `choose_option` and score the answer.
        The caller re-ranks afterwards.
        """
        logger.info(f"Tie-breaker between {c1.name} ({c1.score}) and {c2.name} ({c2.score})")
        question = self.build_tie_breaker_question(c1, c2)
        option = choose_option(question)
        self.scoring_service.apply_score(session, option)
        return option
