"""Article entity.

Articles are owned by the publishing side of the blog; the comment core
only needs to know that one exists and how to link to it.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from blog.domain.model.common import DomainModel, utcnow
from blog.domain.value import ArticleId, Slug, UserId


class ArticleRef(DomainModel):
    """Minimal article reference for moderation listings."""

    id: ArticleId
    title: str
    slug: Slug


class Article(DomainModel):
    """Published article that comments attach to."""

    id: ArticleId
    title: str = Field(min_length=1, max_length=300)
    slug: Slug
    author_id: Optional[UserId] = None
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    def ref(self) -> ArticleRef:
        return ArticleRef(id=self.id, title=self.title, slug=self.slug)
