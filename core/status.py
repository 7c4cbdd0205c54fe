from enum import Enum
from typing import Final


class _RankedEnum(Enum):
    """Enum whose members carry (label, rank, ...) tuples and compare by rank."""

    @property
    def label(self) -> str:
        return self.value[0]

    @property
    def rank(self) -> int:
        return self.value[1]

    def __lt__(self, other):
        if other.__class__ is self.__class__:
            return self.rank < other.rank
        return NotImplemented

    def __le__(self, other):
        if other.__class__ is self.__class__:
            return self.rank <= other.rank
        return NotImplemented

    def __gt__(self, other):
        if other.__class__ is self.__class__:
            return self.rank > other.rank
        return NotImplemented

    def __ge__(self, other):
        if other.__class__ is self.__class__:
            return self.rank >= other.rank
        return NotImplemented

    @classmethod
    def from_string(cls, value: str):
        """Parse a member from its label, case-insensitively.

        Raises ValueError for anything that is not a known label.
        """
        token = (value or "").strip().lower()
        for member in cls:
            if member.label.lower() == token:
                return member
        raise ValueError(f"Invalid {cls.__name__.lower()}: {value!r}")

    @classmethod
    def choices(cls) -> str:
        return "/".join(member.label.lower() for member in cls)


class Status(_RankedEnum):
    TODO = ("ToDo", 0)
    DOING = ("Doing", 1)
    DONE = ("Done", 2)


class Priority(_RankedEnum):
    LOW = ("Low", 0, "[*  ]")
    MEDIUM = ("Medium", 1, "[** ]")
    HIGH = ("High", 2, "[***]")

    @property
    def glyph(self) -> str:
        return self.value[2]


DEFAULT_STATUS: Final[Status] = Status.TODO
DEFAULT_PRIORITY: Final[Priority] = Priority.LOW


def normalize_task_status(value: str) -> Status:
    """Normalize status input (todo/doing/done, any case) to a Status."""
    return Status.from_string(value)


def normalize_task_priority(value: str) -> Priority:
    """Normalize priority input (low/medium/high, any case) to a Priority."""
    return Priority.from_string(value)
