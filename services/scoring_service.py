# services/scoring_service.py
import logging

logger = logging.getLogger(__name__)


class ScoringService:
    """
    Applies answer options to an assessment session.
    """

    def apply_score(self, session, option):
        """
        Add each impact delta to the matching career and record the badge.
        - Career names missing from the registry are ignored.
        - A badge already earned in this session is not added again.
        Applying the same option twice counts it twice.
        """
        for career_name, delta in option.impact.items():
            career = session.registry.lookup(career_name)
            if career is None:
                logger.debug(f"Ignoring impact for unknown career '{career_name}'")
                continue
            career.score += delta

        badge = option.badge_awarded
        if badge and badge not in session.earned_badges:
            session.earned_badges.append(badge)

    def apply_bonus(self, registry, career_name, points):
        """Admin helper: add points straight to one career. Returns False if unknown."""
        career = registry.lookup(career_name)
        if career is None:
            return False
        career.score += points
        logger.info(f"Admin bonus: {career_name} {points:+d} -> {career.score}")
        return True
