"""Domain value objects for voteable.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum
from uuid import UUID

from pydantic import Field, field_validator

from voteable.domain.value.common import RootValueObject, ValueObject


class Disposition(str, Enum):
    """A voter's current stance toward a voteable."""

    UP = "up"
    DOWN = "down"
    ABSTAIN = "abstain"

    @property
    def counter_field(self) -> str:
        """Name of the counter attribute this disposition contributes to."""
        return f"{self.value}_votes"


class EntityRef(ValueObject):
    """Polymorphic reference to a persisted entity.

    Voters and voteables may be heterogeneous entity kinds, so records point
    at them by (kind, id) rather than by foreign key into a single table.
    """

    kind: str = Field(min_length=1, max_length=50)
    id: UUID

    def __str__(self) -> str:
        return f"{self.kind}:{self.id}"


class CounterDelta(ValueObject):
    """Signed change to apply to the three vote counters of one entity."""

    up_votes: int = 0
    down_votes: int = 0
    abstain_votes: int = 0

    @classmethod
    def of(cls, disposition: Disposition, amount: int) -> "CounterDelta":
        """Build a delta touching only the counter for ``disposition``."""
        return cls(**{disposition.counter_field: amount})

    def __add__(self, other: "CounterDelta") -> "CounterDelta":
        return CounterDelta(
            up_votes=self.up_votes + other.up_votes,
            down_votes=self.down_votes + other.down_votes,
            abstain_votes=self.abstain_votes + other.abstain_votes,
        )

    @property
    def is_zero(self) -> bool:
        return not (self.up_votes or self.down_votes or self.abstain_votes)


class Handle(RootValueObject[str]):
    """Human-readable user handle."""

    @field_validator("root")
    @classmethod
    def validate_handle_format(cls, v: str) -> str:
        """Validate handle is not empty and within length limits."""
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Handle must be 1-255 characters")
        return v


class TagName(RootValueObject[str]):
    """Tag name for categorizing posts.

    Must be lowercase, alphanumeric with hyphens, 2-30 characters.
    Examples: 'machine-learning', 'neuroscience', 'paper', 'tool'
    """

    @field_validator("root")
    @classmethod
    def validate_tag_name(cls, v: str) -> str:
        """Validate tag name format."""
        if not re.match(r"^[a-z0-9-]{2,30}$", v):
            raise ValueError(
                "Tag name must be 2-30 characters, lowercase, alphanumeric with hyphens"
            )
        return v
