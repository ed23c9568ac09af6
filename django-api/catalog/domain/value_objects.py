"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from enum import Enum
from typing import Self
from uuid import UUID


@dataclass(frozen=True)
class EventId:
    """Unique identifier for an Event."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class SessionId:
    """Unique identifier for a Session."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class TopicId:
    """Unique identifier for a Topic."""

    value: UUID

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class CategoryId:
    """Unique identifier for a Category."""

    value: UUID

    def __str__(self) -> str:
        return str(self.value)


class TaxonomyType(str, Enum):
    """Closed set of domains a Topic or Category is classified under."""

    DEITIES = "Deities"
    PRACTICES = "Practices"
    CORE_TEACHINGS = "Core Teachings"
    TEXTS = "Texts"
    HISTORICAL_FIGURES = "Historical Figures"

    @classmethod
    def parse(cls, value: str) -> Self:
        """Return the member whose label is ``value``.

        Raises:
            ValueError: If ``value`` is not one of the five labels.
        """
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"{value!r} is not a valid taxonomy type") from None

    @classmethod
    def labels(cls) -> list[str]:
        return [member.value for member in cls]
