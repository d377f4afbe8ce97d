# models/career.py
class Career:
    """A career path the assessment scores answers against."""

    def __init__(self, name, description, salary_range, score=0):
        self._name = name
        self.description = description
        self.salary_range = salary_range
        self.score = score

    @property
    def name(self):
        return self._name

    def to_dict(self):
        return {
            'name': self.name,
            'salary_range': self.salary_range,
            'description': self.description,
            'score': self.score
        }

    @classmethod
    def from_dict(cls, data):
        return cls(
            name=data['name'],
            description=data.get('description', ''),
            salary_range=data.get('salary_range', ''),
            score=data.get('score', 0)
        )

    def __repr__(self):
        return f"Career({self.name!r}, score={self.score})"


class CareerRegistry:
    """
    Fixed set of careers with a name-keyed lookup.
    Iteration order is insertion order; ranking relies on it for equal scores.
    """

    def __init__(self, careers=None):
        self._careers = []
        self._lookup = {}
        for career in careers or []:
            self.add(career)

    @classmethod
    def from_catalog(cls, entries):
        """Build a registry from a list of career dicts (see questions/careers.py)."""
        return cls(Career.from_dict(entry) for entry in entries)

    def add(self, career):
        if career.name in self._lookup:
            raise ValueError(f"Duplicate career name: {career.name}")
        self._careers.append(career)
        self._lookup[career.name] = career

    def lookup(self, name):
        """Return the career called `name`, or None if it is not registered."""
        return self._lookup.get(name)

    def all(self):
        return list(self._careers)

    def names(self):
        return [career.name for career in self._careers]

    def reset_scores(self):
        for career in self._careers:
            career.score = 0

    def __len__(self):
        return len(self._careers)

    def __iter__(self):
        return iter(self._careers)

    def __contains__(self, name):
        return name in self._lookup
