"""Domain value objects for the blog.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum

from pydantic import field_validator

from blog.domain.value.common import RootValueObject, ValueObject
from blog.domain.value.identifiers import UserId

AUTHOR_NAME_MAX_LENGTH = 100
COMMENT_CONTENT_MAX_LENGTH = 5000


class Role(str, Enum):
    """Capability level of a registered user."""

    USER = "USER"
    ADMIN = "ADMIN"


class AuthorName(RootValueObject[str]):
    """Display name supplied by an anonymous commenter.

    Not tied to any account. Must be 1-100 characters after trimming.
    """

    @field_validator("root")
    @classmethod
    def validate_author_name(cls, v: str) -> str:
        """Trim and validate the display name."""
        v = v.strip()
        if len(v) < 1 or len(v) > AUTHOR_NAME_MAX_LENGTH:
            raise ValueError(
                f"Author name must be 1-{AUTHOR_NAME_MAX_LENGTH} characters"
            )
        return v


class Slug(RootValueObject[str]):
    """URL-safe article slug."""

    @field_validator("root")
    @classmethod
    def validate_slug_format(cls, v: str) -> str:
        """Validate slug format."""
        if not re.match(r"^[a-z0-9]+(?:-[a-z0-9]+)*$", v):
            raise ValueError(
                "Slug must be lowercase alphanumeric with hyphens, "
                "no leading/trailing hyphens or consecutive hyphens"
            )
        return v


class Actor(ValueObject):
    """Authenticated caller, resolved by the session layer.

    The comment core never verifies credentials itself; it only checks
    the capability carried by the actor.
    """

    user_id: UserId
    role: Role = Role.USER

    @property
    def is_admin(self) -> bool:
        """Whether the actor has administrator capability."""
        return self.role == Role.ADMIN
