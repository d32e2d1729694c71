"""SQLAlchemy table definitions for voteable.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    Enum,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()


def vote_counter_columns() -> list[Column]:
    """Denormalized vote counters shared by voteables and counting voters."""
    return [
        Column("up_votes", Integer, nullable=False, server_default="0"),
        Column("down_votes", Integer, nullable=False, server_default="0"),
        Column("abstain_votes", Integer, nullable=False, server_default="0"),
    ]


# ============================================================================
# USERS TABLE (voter, tracks vote counters)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("handle", String(255), nullable=False),
    *vote_counter_columns(),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_users_handle", users_table.c.handle)

# ============================================================================
# GUESTS TABLE (voter, no counters)
# ============================================================================
guests_table = Table(
    "guests",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("display_name", String(100), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# POSTS TABLE (voteable)
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("title", String(300), nullable=False),
    Column("url", Text, nullable=True),
    Column("text", Text, nullable=True),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    *vote_counter_columns(),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "(url IS NOT NULL OR text IS NOT NULL)",
        name="url_or_text_required",
    ),
)

Index("idx_posts_created_at", posts_table.c.created_at.desc())
Index("idx_posts_author_id", posts_table.c.author_id)

# ============================================================================
# COMMENTS TABLE (voteable)
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("post_id", UUID, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False),
    Column(
        "parent_id", UUID, ForeignKey("comments.id", ondelete="CASCADE"), nullable=True
    ),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("text", Text, nullable=False),
    *vote_counter_columns(),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_comments_post_id", comments_table.c.post_id)
Index("idx_comments_parent_id", comments_table.c.parent_id)

# ============================================================================
# TAGS TABLE (neither voter nor voteable)
# ============================================================================
tags_table = Table(
    "tags",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("name", String(30), nullable=False, unique=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# VOTE RECORDS TABLE (polymorphic voter and voteable)
# ============================================================================
vote_records_table = Table(
    "vote_records",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("voter_type", String(50), nullable=False),
    Column("voter_id", UUID, nullable=False),
    Column("voteable_type", String(50), nullable=False),
    Column("voteable_id", UUID, nullable=False),
    Column(
        "disposition",
        Enum("up", "down", "abstain", name="disposition", create_type=False),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint(
        "voter_type",
        "voter_id",
        "voteable_type",
        "voteable_id",
        name="unique_vote_record",
    ),
)

Index(
    "idx_vote_records_voteable",
    vote_records_table.c.voteable_type,
    vote_records_table.c.voteable_id,
)

# Discriminator -> table for every registered entity kind
ENTITY_TABLES: dict[str, Table] = {
    "user": users_table,
    "guest": guests_table,
    "post": posts_table,
    "comment": comments_table,
    "tag": tags_table,
}
