"""Registry of entity kinds.

Maps the type discriminator stored in polymorphic references to the domain
model class that owns it.
"""

from typing import Type

from voteable.domain.error import NotFoundError
from voteable.domain.model.comment import Comment
from voteable.domain.model.entity import Entity
from voteable.domain.model.guest import Guest
from voteable.domain.model.post import Post
from voteable.domain.model.tag import Tag
from voteable.domain.model.user import User

ENTITY_KINDS: dict[str, Type[Entity]] = {
    cls.kind: cls for cls in (User, Guest, Post, Comment, Tag)
}


def entity_type(kind: str) -> Type[Entity]:
    """Look up the entity class registered for ``kind``.

    Raises:
        NotFoundError: If no entity type is registered under ``kind``
    """
    try:
        return ENTITY_KINDS[kind]
    except KeyError:
        raise NotFoundError("Entity kind", kind) from None
