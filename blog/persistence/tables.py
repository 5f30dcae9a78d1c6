"""SQLAlchemy table definitions for the blog service.

These match the schema defined in Alembic migrations. Posts keep their
tag, category, comment and like references as UUID arrays, mirroring the
document-style reference lists of the domain model.
"""

from sqlalchemy import (
    Column,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import ARRAY, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE (written by the auth service, read here)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", String(255), primary_key=True),
    Column("name", String(255), nullable=False),
    Column("email", String(255), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("title", Text, nullable=False),
    Column("content", Text, nullable=False),
    Column("author_id", String(255), nullable=False),
    Column("tag_ids", ARRAY(UUID(as_uuid=True)), nullable=False, server_default="{}"),
    Column(
        "category_ids", ARRAY(UUID(as_uuid=True)), nullable=False, server_default="{}"
    ),
    Column(
        "comment_ids", ARRAY(UUID(as_uuid=True)), nullable=False, server_default="{}"
    ),
    Column("like_ids", ARRAY(UUID(as_uuid=True)), nullable=False, server_default="{}"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_posts_created_at", posts_table.c.created_at.desc())
Index("idx_posts_author_id", posts_table.c.author_id)
Index("idx_posts_tag_ids", posts_table.c.tag_ids, postgresql_using="gin")
Index("idx_posts_category_ids", posts_table.c.category_ids, postgresql_using="gin")

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("post_id", UUID(as_uuid=True), ForeignKey("posts.id"), nullable=False),
    Column("author_id", String(255), nullable=False),
    Column("content", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_comments_post_created",
    comments_table.c.post_id,
    comments_table.c.created_at.desc(),
)

# ============================================================================
# LIKES TABLE
# ============================================================================
likes_table = Table(
    "likes",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("post_id", UUID(as_uuid=True), ForeignKey("posts.id"), nullable=False),
    Column("user_id", String(255), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("post_id", "user_id", name="uq_likes_post_user"),
)

# ============================================================================
# TAXONOMY TABLES
# ============================================================================
tags_table = Table(
    "tags",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("name", String(100), nullable=False, unique=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

categories_table = Table(
    "categories",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("name", String(100), nullable=False, unique=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)
