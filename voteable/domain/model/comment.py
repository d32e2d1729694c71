"""Comment entity."""

from datetime import datetime
from typing import ClassVar, Optional

from pydantic import Field

from voteable.domain.model.entity import Entity, Voteable
from voteable.domain.value import CommentId, PostId, UserId


class Comment(Entity, Voteable):
    """Comment on a post or reply to another comment."""

    kind: ClassVar[str] = "comment"

    id: CommentId
    post_id: PostId
    author_id: UserId
    text: str = Field(min_length=1, max_length=10000)
    parent_id: Optional[CommentId] = None
    created_at: datetime = Field(default_factory=datetime.now)
