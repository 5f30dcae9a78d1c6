"""initial_schema

Create the schema for the blog service:
- Users (read-only projection of the auth service's users)
- Posts (reference lists for tags, categories, comments and likes)
- Comments (flat, one post each)
- Likes (one per user per post)
- Tags and Categories (shared, unique by name)

Revision ID: 3f2c9a41d7e0
Revises:
Create Date: 2026-10-19 10:12:44.318205

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f2c9a41d7e0"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
    ]


def _uuid_array(name: str) -> sa.Column:
    return sa.Column(
        name,
        postgresql.ARRAY(sa.UUID()),
        nullable=False,
        server_default=sa.text("'{}'"),
    )


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # USERS table (rows written by the auth service)
    # ========================================================================
    op.create_table(
        "users",
        sa.Column("id", sa.String(255), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
    )

    # ========================================================================
    # TAGS and CATEGORIES tables
    # ========================================================================
    for table in ("tags", "categories"):
        op.create_table(
            table,
            sa.Column("id", sa.UUID(), nullable=False),
            sa.Column("name", sa.String(100), nullable=False),
            *_timestamps(),
            sa.PrimaryKeyConstraint("id"),
            sa.UniqueConstraint("name", name=f"uq_{table}_name"),
        )

    # ========================================================================
    # POSTS table
    # ========================================================================
    op.create_table(
        "posts",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("author_id", sa.String(255), nullable=False),
        _uuid_array("tag_ids"),
        _uuid_array("category_ids"),
        _uuid_array("comment_ids"),
        _uuid_array("like_ids"),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_posts_created_at", "posts", [sa.text("created_at DESC")])
    op.create_index("idx_posts_author_id", "posts", ["author_id"])
    # Orphan sweeps count posts containing a given id
    op.create_index(
        "idx_posts_tag_ids", "posts", ["tag_ids"], postgresql_using="gin"
    )
    op.create_index(
        "idx_posts_category_ids", "posts", ["category_ids"], postgresql_using="gin"
    )

    # ========================================================================
    # COMMENTS table
    # ========================================================================
    op.create_table(
        "comments",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("post_id", sa.UUID(), nullable=False),
        sa.Column("author_id", sa.String(255), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(["post_id"], ["posts.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_comments_post_created",
        "comments",
        ["post_id", sa.text("created_at DESC")],
    )

    # ========================================================================
    # LIKES table
    # ========================================================================
    op.create_table(
        "likes",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("post_id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.String(255), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["post_id"], ["posts.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("post_id", "user_id", name="uq_likes_post_user"),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("likes")
    op.drop_index("idx_comments_post_created", table_name="comments")
    op.drop_table("comments")
    op.drop_index("idx_posts_category_ids", table_name="posts")
    op.drop_index("idx_posts_tag_ids", table_name="posts")
    op.drop_index("idx_posts_author_id", table_name="posts")
    op.drop_index("idx_posts_created_at", table_name="posts")
    op.drop_table("posts")
    op.drop_table("categories")
    op.drop_table("tags")
    op.drop_table("users")
