"""Test configuration and fixtures."""

from uuid import uuid4

from voteable.domain.model import Comment, Guest, Post, Tag, User
from voteable.domain.value import (
    CommentId,
    GuestId,
    Handle,
    PostId,
    TagId,
    TagName,
    UserId,
)


def make_user(handle: str = "alice.example.com", **counters: int) -> User:
    """Helper to build a voter that tracks its own vote counters."""
    return User(id=UserId(uuid4()), handle=Handle(handle), **counters)


def make_guest(display_name: str | None = "visitor") -> Guest:
    """Helper to build a voter without vote counters."""
    return Guest(id=GuestId(uuid4()), display_name=display_name)


def make_post(title: str = "Test Post", **counters: int) -> Post:
    """Helper to build a voteable post."""
    return Post(
        id=PostId(uuid4()),
        title=title,
        author_id=UserId(uuid4()),
        text="Test content",
        **counters,
    )


def make_comment(post_id: PostId | None = None, **counters: int) -> Comment:
    """Helper to build a voteable comment."""
    return Comment(
        id=CommentId(uuid4()),
        post_id=post_id or PostId(uuid4()),
        author_id=UserId(uuid4()),
        text="Test comment",
        **counters,
    )


def make_tag(name: str = "discussion") -> Tag:
    """Helper to build an entity that can neither vote nor be voted on."""
    return Tag(id=TagId(uuid4()), name=TagName(name))
