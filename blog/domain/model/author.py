"""Comment authorship.

A comment is written either by a registered user or by an anonymous
visitor who supplies a display name. The two cases are separate variants
so a comment can never carry both or neither.
"""

from typing import Annotated, Literal, Optional, Union

from pydantic import Field

from blog.domain.error import ValidationError
from blog.domain.model.common import DomainModel
from blog.domain.value import AuthorName, UserId


class RegisteredAuthor(DomainModel):
    """Comment written by a signed-in user."""

    kind: Literal["registered"] = "registered"
    user_id: UserId


class AnonymousAuthor(DomainModel):
    """Comment written by a visitor under a free-form display name."""

    kind: Literal["anonymous"] = "anonymous"
    name: AuthorName


Author = Annotated[
    Union[RegisteredAuthor, AnonymousAuthor], Field(discriminator="kind")
]


class AuthorSnapshot(DomainModel):
    """Public view of a registered author at read time."""

    id: UserId
    name: Optional[str] = None
    avatar_url: Optional[str] = None


def resolve_author(
    user_id: Optional[UserId], author_name: Optional[str]
) -> RegisteredAuthor | AnonymousAuthor:
    """Resolve the author variant for a new comment.

    A user id takes precedence; the display name is then ignored.

    Args:
        user_id: Authenticated user, if any
        author_name: Display name supplied by an anonymous visitor

    Returns:
        The author variant

    Raises:
        ValidationError: If neither identity is usable
    """
    if user_id is not None:
        return RegisteredAuthor(user_id=user_id)

    if author_name is None or not author_name.strip():
        raise ValidationError(
            "author_name", "Name is required for anonymous comments"
        )

    try:
        return AnonymousAuthor(name=AuthorName(author_name))
    except ValueError:
        raise ValidationError(
            "author_name", "Name must be between 1 and 100 characters"
        )
