"""Article repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from blog.domain.model.article import Article
from blog.domain.value import ArticleId


class ArticleRepository(ABC):
    """Read access to articles for the comment core.

    Article authoring lives elsewhere; ``save`` exists for seeding and tests.
    """

    @abstractmethod
    async def find_by_id(self, article_id: ArticleId) -> Optional[Article]:
        """Find an article by ID."""
        pass

    @abstractmethod
    async def find_by_ids(
        self, article_ids: Sequence[ArticleId]
    ) -> dict[ArticleId, Article]:
        """Batch lookup of articles keyed by ID; missing IDs are left out."""
        pass

    @abstractmethod
    async def save(self, article: Article) -> Article:
        """Save an article (create or update)."""
        pass
