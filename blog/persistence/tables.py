"""SQLAlchemy table definitions for the blog.

These tables are used with SQLAlchemy Core; rows are mapped to the
Pydantic domain models in ``mappers``. They match the schema defined in
the Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Enum,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    Text,
    text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

from blog.domain.value import AUTHOR_NAME_MAX_LENGTH, Role

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE (owned by the auth layer)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column(
        "id", UUID, primary_key=True, server_default=text("gen_random_uuid()")
    ),
    Column("name", String(255), nullable=True),
    Column("email", String(255), nullable=True, unique=True),
    Column("image", Text, nullable=True),  # Avatar URL
    Column(
        "role",
        Enum(Role, name="user_role", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        server_default=Role.USER.value,
    ),
    Column(
        "created_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
    Column(
        "updated_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
)

# ============================================================================
# ARTICLES TABLE (owned by the publishing side)
# ============================================================================
articles_table = Table(
    "articles",
    metadata,
    Column(
        "id", UUID, primary_key=True, server_default=text("gen_random_uuid()")
    ),
    Column("title", String(300), nullable=False),
    Column("slug", String(255), nullable=False, unique=True),
    Column(
        "author_id",
        UUID,
        ForeignKey("users.id", ondelete="SET NULL", name="fk_articles_author_id"),
        nullable=True,
    ),
    Column(
        "created_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
    Column(
        "updated_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
# Constraint names are matched when translating integrity errors.
FK_COMMENTS_ARTICLE_ID = "fk_comments_article_id"
FK_COMMENTS_PARENT_ID = "fk_comments_parent_id"
FK_COMMENTS_USER_ID = "fk_comments_user_id"

comments_table = Table(
    "comments",
    metadata,
    Column(
        "id", UUID, primary_key=True, server_default=text("gen_random_uuid()")
    ),
    Column(
        "article_id",
        UUID,
        ForeignKey("articles.id", ondelete="CASCADE", name=FK_COMMENTS_ARTICLE_ID),
        nullable=False,
    ),
    Column(
        "parent_id",
        UUID,
        ForeignKey("comments.id", ondelete="CASCADE", name=FK_COMMENTS_PARENT_ID),
        nullable=True,
    ),
    Column(
        "user_id",
        UUID,
        ForeignKey("users.id", ondelete="CASCADE", name=FK_COMMENTS_USER_ID),
        nullable=True,
    ),
    Column("author_name", String(AUTHOR_NAME_MAX_LENGTH), nullable=True),
    Column("content", Text, nullable=False),
    Column("is_read", Boolean, nullable=False, server_default=text("false")),
    Column("read_at", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "read_by",
        UUID,
        ForeignKey("users.id", ondelete="SET NULL", name="fk_comments_read_by"),
        nullable=True,
    ),
    Column(
        "created_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
    Column(
        "updated_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
    CheckConstraint(
        "user_id IS NOT NULL OR author_name IS NOT NULL",
        name="ck_comments_has_author",
    ),
)

Index("idx_comments_article_id", comments_table.c.article_id)
Index("idx_comments_parent_id", comments_table.c.parent_id)
Index("idx_comments_user_id", comments_table.c.user_id)
Index(
    "idx_comments_unread_created_at",
    comments_table.c.is_read,
    comments_table.c.created_at,
)
