"""Tag entity for categorizing posts."""

from datetime import datetime
from typing import ClassVar

from pydantic import Field

from voteable.domain.model.entity import Entity
from voteable.domain.value import TagId, TagName


class Tag(Entity):
    """Tag entity.

    Tags are persisted but carry no voting capability: they can neither
    cast nor receive votes.
    """

    kind: ClassVar[str] = "tag"

    id: TagId
    name: TagName
    created_at: datetime = Field(default_factory=datetime.now)
