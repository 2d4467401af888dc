"""User aggregate root.

Accounts, credentials and sessions are managed by the auth layer; the
comment core reads users for display snapshots only.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from blog.domain.model.author import AuthorSnapshot
from blog.domain.model.common import DomainModel, utcnow
from blog.domain.value import Role, UserId


class User(DomainModel):
    """Registered user."""

    id: UserId
    name: Optional[str] = None
    email: Optional[str] = None
    image: Optional[str] = None  # Avatar URL
    role: Role = Role.USER
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    def snapshot(self) -> AuthorSnapshot:
        """Public author details shown next to a comment."""
        return AuthorSnapshot(id=self.id, name=self.name, avatar_url=self.image)
