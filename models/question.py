# models/question.py
from types import MappingProxyType


class QuestionDataError(ValueError):
    """Raised when a question document does not have the expected shape."""


def _field(data, name, default=None):
    """
    Read `name` from a document object.
    Exact key first, then a case-insensitive match so documents written
    with PascalCase keys ("Text", "BadgeAwarded") load as well.
    """
    if name in data:
        return data[name]
    lowered = name.lower()
    for key, value in data.items():
        if isinstance(key, str) and key.lower() == lowered:
            return value
    return default


class Option:
    """One selectable answer: per-career point deltas plus an optional badge."""

    def __init__(self, text, impact=None, badge_awarded=None):
        self._text = text
        self._impact = MappingProxyType(dict(impact or {}))
        # empty badge names are treated as "no badge"
        self._badge_awarded = badge_awarded or None

    @property
    def text(self):
        return self._text

    @property
    def impact(self):
        """Read-only career name -> delta mapping."""
        return self._impact

    @property
    def badge_awarded(self):
        return self._badge_awarded

    def to_dict(self):
        data = {'text': self.text, 'impact': dict(self.impact)}
        if self.badge_awarded:
            data['badgeAwarded'] = self.badge_awarded
        return data

    @classmethod
    def from_dict(cls, data):
        if not isinstance(data, dict):
            raise QuestionDataError(f"Option must be an object, got {type(data).__name__}")

        text = _field(data, 'text')
        if not isinstance(text, str):
            raise QuestionDataError("Option is missing its 'text'")

        impact = _field(data, 'impact', {})
        if impact is None:
            impact = {}
        if not isinstance(impact, dict):
            raise QuestionDataError(f"Impact of option '{text}' must be an object")
        for career_name, delta in impact.items():
            # bool is an int subclass but never a valid delta
            if isinstance(delta, bool) or not isinstance(delta, int):
                raise QuestionDataError(
                    f"Impact for '{career_name}' in option '{text}' must be an integer, got {delta!r}"
                )

        badge = _field(data, 'badgeAwarded')
        if badge is not None and not isinstance(badge, str):
            raise QuestionDataError(f"Badge of option '{text}' must be a string")

        return cls(text, impact, badge)

    def __eq__(self, other):
        if not isinstance(other, Option):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self):
        return f"Option({self.text!r}, impact={dict(self.impact)!r}, badge_awarded={self.badge_awarded!r})"


class Question:
    """Question text with an ordered, non-empty sequence of options."""

    def __init__(self, text, options):
        options = tuple(options)
        if not options:
            raise QuestionDataError(f"Question '{text}' has no options")
        self._text = text
        self._options = options

    @property
    def text(self):
        return self._text

    @property
    def options(self):
        return self._options

    def to_dict(self):
        return {
            'text': self.text,
            'options': [option.to_dict() for option in self.options]
        }

    @classmethod
    def from_dict(cls, data):
        if not isinstance(data, dict):
            raise QuestionDataError(f"Question must be an object, got {type(data).__name__}")

        text = _field(data, 'text')
        if not isinstance(text, str):
            raise QuestionDataError("Question is missing its 'text'")

        options = _field(data, 'options')
        if not isinstance(options, list):
            raise QuestionDataError(f"Question '{text}' must have a list of options")

        return cls(text, [Option.from_dict(option) for option in options])

    def __eq__(self, other):
        if not isinstance(other, Question):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self):
        return f"Question({self.text!r}, options={len(self.options)})"


def questions_from_document(document):
    """Parse a question source document (a list of question objects)."""
    if not isinstance(document, list):
        raise QuestionDataError(f"Question document must be a list, got {type(document).__name__}")
    return [Question.from_dict(item) for item in document]


def questions_to_document(questions):
    return [question.to_dict() for question in questions]
