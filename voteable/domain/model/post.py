"""Post entity."""

from datetime import datetime
from typing import ClassVar, Optional

from pydantic import Field, model_validator

from voteable.domain.model.entity import Entity, Voteable
from voteable.domain.value import PostId, UserId


class Post(Entity, Voteable):
    """Post that users and guests can vote on.

    A post links to a URL, carries text, or both.
    """

    kind: ClassVar[str] = "post"

    id: PostId
    title: str = Field(min_length=1, max_length=300)
    author_id: UserId
    url: Optional[str] = None
    text: Optional[str] = Field(default=None, max_length=10000)
    created_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def validate_url_or_text(self) -> "Post":
        """Validate that a URL or text is provided."""
        if not self.url and not self.text:
            raise ValueError("Post requires a URL or text")
        return self
