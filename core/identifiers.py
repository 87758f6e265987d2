"""Project identifier resolution for resource paths."""

from urllib.parse import quote

from core.errors import InvalidArgumentError


def path_escape(segment):
    """Escape a value so it can be placed inside a single URL path segment.

    Path separators are escaped too, so ``group/project`` becomes
    ``group%2Fproject``.
    """
    return quote(str(segment), safe='')


class ProjectID:
    """A project reference: either a numeric id or a namespaced path."""

    NUMERIC = 'numeric'
    PATH = 'path'

    __slots__ = ('kind', 'value')

    def __init__(self, kind, value):
        if kind == self.NUMERIC:
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise InvalidArgumentError(f"invalid numeric project ID: {value!r}")
        elif kind == self.PATH:
            if not isinstance(value, str) or not value:
                raise InvalidArgumentError(f"invalid project path: {value!r}")
        else:
            raise InvalidArgumentError(f"unknown project ID kind: {kind!r}")
        self.kind = kind
        self.value = value

    @classmethod
    def numeric(cls, value):
        return cls(cls.NUMERIC, value)

    @classmethod
    def path(cls, value):
        return cls(cls.PATH, value)

    def segment(self):
        """Return the escaped path segment for this project."""
        return path_escape(self.value)

    def __eq__(self, other):
        if not isinstance(other, ProjectID):
            return NotImplemented
        return self.kind == other.kind and self.value == other.value

    def __hash__(self):
        return hash((self.kind, self.value))

    def __repr__(self):
        return f"ProjectID.{self.kind}({self.value!r})"


def to_project_id(pid):
    """Normalize an int, str or ProjectID into a ProjectID.

    Raises:
        InvalidArgumentError: if ``pid`` is of any other type.
    """
    if isinstance(pid, ProjectID):
        return pid
    # bool is an int subclass but never a valid project ID
    if isinstance(pid, int) and not isinstance(pid, bool):
        return ProjectID.numeric(pid)
    if isinstance(pid, str):
        return ProjectID.path(pid)
    raise InvalidArgumentError(
        f"invalid ID type {pid!r}, the ID must be an int or a string"
    )


def parse_id(pid):
    """Resolve a project reference into an escaped URL path segment."""
    return to_project_id(pid).segment()


def resource_id(value, name='ID'):
    """Validate a numeric resource ID such as a merge request IID or check ID."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{name} must be an int, got {value!r}")
    return value
