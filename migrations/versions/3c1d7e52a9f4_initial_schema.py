"""initial_schema

Create the foundational schema for voteable:
- Users (voters that track vote counters)
- Guests (voters without counters)
- Posts and Comments (voteables with vote counters)
- Tags (neither voter nor voteable)
- Vote records (one per voter/voteable pair, polymorphic references)

Revision ID: 3c1d7e52a9f4
Revises:
Create Date: 2026-10-18 10:12:44.518203

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1d7e52a9f4"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _id_column() -> sa.Column:
    return sa.Column(
        "id",
        sa.UUID(),
        server_default=sa.text("uuid_generate_v4()"),
        nullable=False,
    )


def _created_at_column() -> sa.Column:
    return sa.Column(
        "created_at",
        postgresql.TIMESTAMP(timezone=True),
        server_default=sa.text("NOW()"),
        nullable=False,
    )


def _counter_columns() -> list[sa.Column]:
    return [
        sa.Column("up_votes", sa.Integer(), server_default="0", nullable=False),
        sa.Column("down_votes", sa.Integer(), server_default="0", nullable=False),
        sa.Column("abstain_votes", sa.Integer(), server_default="0", nullable=False),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    # Enable required extensions
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # Create ENUM types (idempotent)
    op.execute("""
        DO $$ BEGIN
            CREATE TYPE disposition AS ENUM ('up', 'down', 'abstain');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        _id_column(),
        sa.Column("handle", sa.String(255), nullable=False),
        *_counter_columns(),
        _created_at_column(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_users_handle", "users", ["handle"])

    # ========================================================================
    # GUESTS table
    # ========================================================================
    op.create_table(
        "guests",
        _id_column(),
        sa.Column("display_name", sa.String(100), nullable=True),
        _created_at_column(),
        sa.PrimaryKeyConstraint("id"),
    )

    # ========================================================================
    # POSTS table
    # ========================================================================
    op.create_table(
        "posts",
        _id_column(),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("url", sa.Text(), nullable=True),
        sa.Column("text", sa.Text(), nullable=True),
        sa.Column("author_id", sa.UUID(), nullable=False),
        *_counter_columns(),
        _created_at_column(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
        sa.CheckConstraint(
            "(url IS NOT NULL OR text IS NOT NULL)", name="url_or_text_required"
        ),
    )
    op.create_index(
        "idx_posts_created_at", "posts", [sa.text("created_at DESC")]
    )
    op.create_index("idx_posts_author_id", "posts", ["author_id"])

    # ========================================================================
    # COMMENTS table
    # ========================================================================
    op.create_table(
        "comments",
        _id_column(),
        sa.Column("post_id", sa.UUID(), nullable=False),
        sa.Column("parent_id", sa.UUID(), nullable=True),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("text", sa.Text(), nullable=False),
        *_counter_columns(),
        _created_at_column(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["post_id"], ["posts.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["parent_id"], ["comments.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
    )
    op.create_index("idx_comments_post_id", "comments", ["post_id"])
    op.create_index("idx_comments_parent_id", "comments", ["parent_id"])

    # ========================================================================
    # TAGS table
    # ========================================================================
    op.create_table(
        "tags",
        _id_column(),
        sa.Column("name", sa.String(30), nullable=False),
        _created_at_column(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
    )

    # ========================================================================
    # VOTE_RECORDS table
    # ========================================================================
    op.create_table(
        "vote_records",
        _id_column(),
        sa.Column("voter_type", sa.String(50), nullable=False),
        sa.Column("voter_id", sa.UUID(), nullable=False),
        sa.Column("voteable_type", sa.String(50), nullable=False),
        sa.Column("voteable_id", sa.UUID(), nullable=False),
        sa.Column(
            "disposition",
            postgresql.ENUM(
                "up", "down", "abstain", name="disposition", create_type=False
            ),
            nullable=False,
        ),
        _created_at_column(),
        sa.Column(
            "updated_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "voter_type",
            "voter_id",
            "voteable_type",
            "voteable_id",
            name="unique_vote_record",
        ),
    )
    op.create_index(
        "idx_vote_records_voteable",
        "vote_records",
        ["voteable_type", "voteable_id"],
    )


def downgrade() -> None:
    """Downgrade schema."""
    # Drop tables (in reverse order of dependencies)
    op.drop_table("vote_records")
    op.drop_table("tags")
    op.drop_table("comments")
    op.drop_table("posts")
    op.drop_table("guests")
    op.drop_table("users")

    # Drop ENUM types
    op.execute("DROP TYPE IF EXISTS disposition")
