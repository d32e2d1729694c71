"""Domain model entities for voteable."""

from voteable.domain.model.comment import Comment
from voteable.domain.model.entity import (
    Entity,
    TracksVoteCounters,
    VoteCounters,
    Voteable,
    Voter,
)
from voteable.domain.model.guest import Guest
from voteable.domain.model.post import Post
from voteable.domain.model.registry import ENTITY_KINDS, entity_type
from voteable.domain.model.tag import Tag
from voteable.domain.model.user import User
from voteable.domain.model.vote import VoteRecord

__all__ = [
    "Entity",
    "VoteCounters",
    "Voteable",
    "Voter",
    "TracksVoteCounters",
    "User",
    "Guest",
    "Post",
    "Comment",
    "Tag",
    "VoteRecord",
    "ENTITY_KINDS",
    "entity_type",
]
