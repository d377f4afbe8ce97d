# models/assessment.py
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Tuple

from config import Config


class AssessmentStateError(RuntimeError):
    """Raised when an assessment step is requested out of order."""


class AssessmentState:
    IDLE = 'idle'
    ASKING_QUESTIONS = 'asking_questions'
    RANKED = 'ranked'
    TIE_BREAK = 'tie_break'
    FINALIZED = 'finalized'


class AssessmentSession:
    """
    Scoring state for one assessment run.
    Holds a reference to the career registry (scores live on the careers)
    and owns the earned badges, the question sequence and the run's state.
    """

    def __init__(self, registry, user_name=None):
        self.registry = registry
        self.user_name = user_name or Config.DEFAULT_USER_NAME
        self.earned_badges = []
        self.questions = []
        self.position = 0
        self.state = AssessmentState.IDLE
        self.ranking = []
        self.tie_breaker_pair = None
        self.tie_breaker_used = False

    def reset(self):
        """Zero every career score and forget earned badges."""
        self.registry.reset_scores()
        self.earned_badges.clear()
        self.position = 0
        self.ranking = []
        self.tie_breaker_pair = None
        self.tie_breaker_used = False
        self.state = AssessmentState.IDLE

    @property
    def total_questions(self):
        return len(self.questions)

    def require_state(self, *states):
        if self.state not in states:
            raise AssessmentStateError(
                f"Assessment is '{self.state}', expected one of: {', '.join(states)}"
            )


@dataclass(frozen=True)
class CareerResult:
    name: str
    salary_range: str
    description: str
    score: int

    @classmethod
    def from_career(cls, career):
        return cls(career.name, career.salary_range, career.description, career.score)

    def to_dict(self):
        return {
            'name': self.name,
            'salary_range': self.salary_range,
            'description': self.description,
            'score': self.score
        }


@dataclass(frozen=True)
class AssessmentResult:
    """Immutable snapshot handed to presentation and export."""

    user_name: str
    ranked: Tuple[CareerResult, ...]
    badges: Tuple[str, ...]
    tie_breaker_used: bool = False
    completed_at: datetime = field(default_factory=datetime.now)

    @classmethod
    def from_session(cls, session):
        return cls(
            user_name=session.user_name,
            ranked=tuple(CareerResult.from_career(c) for c in session.ranking),
            badges=tuple(session.earned_badges),
            tie_breaker_used=session.tie_breaker_used
        )

    @property
    def top_recommendation(self) -> Optional[CareerResult]:
        return self.ranked[0] if self.ranked else None

    def to_dict(self):
        top = self.top_recommendation
        return {
            'user_name': self.user_name,
            'top_recommendation': top.to_dict() if top else None,
            'ranked': [career.to_dict() for career in self.ranked],
            'badges': list(self.badges),
            'tie_breaker_used': self.tie_breaker_used,
            'completed_at': self.completed_at.isoformat()
        }
