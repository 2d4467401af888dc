"""Mappers for converting between database rows and domain models.

Domain models are immutable Pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's imperative mapping.
"""

from typing import Any, Dict, Optional
from uuid import UUID

from blog.domain.model import (
    AnonymousAuthor,
    Article,
    Comment,
    RegisteredAuthor,
    User,
)
from blog.domain.value import (
    ArticleId,
    AuthorName,
    CommentId,
    Role,
    Slug,
    UserId,
)


def _uuid(value: Any) -> Optional[UUID]:
    """Normalise a UUID column value (asyncpg returns UUID, some drivers str)."""
    if value is None:
        return None
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        name=row.get("name"),
        email=row.get("email"),
        image=row.get("image"),
        role=Role(row["role"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return user.model_dump()


def row_to_article(row: Dict[str, Any]) -> Article:
    """Convert database row to Article domain model."""
    author_id = _uuid(row.get("author_id"))
    return Article(
        id=ArticleId(_uuid(row["id"])),
        title=row["title"],
        slug=Slug(row["slug"]),
        author_id=UserId(author_id) if author_id else None,
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def article_to_dict(article: Article) -> Dict[str, Any]:
    """Convert Article domain model to database dict."""
    return article.model_dump()


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    The row stores authorship as two nullable columns; a set ``user_id``
    always wins, matching how comments are created.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    user_id = _uuid(row.get("user_id"))
    author: RegisteredAuthor | AnonymousAuthor
    if user_id is not None:
        author = RegisteredAuthor(user_id=UserId(user_id))
    else:
        author = AnonymousAuthor(name=AuthorName(row["author_name"]))

    parent_id = _uuid(row.get("parent_id"))
    read_by = _uuid(row.get("read_by"))

    return Comment(
        id=CommentId(_uuid(row["id"])),
        article_id=ArticleId(_uuid(row["article_id"])),
        author=author,
        content=row["content"],
        parent_id=CommentId(parent_id) if parent_id else None,
        is_read=row["is_read"],
        read_at=row.get("read_at"),
        read_by=UserId(read_by) if read_by else None,
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Flattens the author variant into the ``user_id``/``author_name``
    column pair.
    """
    data = comment.model_dump(exclude={"author"})
    data["user_id"] = comment.user_id
    data["author_name"] = comment.author_name
    return data
