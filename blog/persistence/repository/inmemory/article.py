"""In-memory article repository for testing."""

from typing import Optional, Sequence

from blog.domain.model.article import Article
from blog.domain.repository.article import ArticleRepository
from blog.domain.value import ArticleId


class InMemoryArticleRepository(ArticleRepository):
    """In-memory implementation of ArticleRepository for testing."""

    def __init__(self) -> None:
        self._articles: dict[ArticleId, Article] = {}

    async def find_by_id(self, article_id: ArticleId) -> Optional[Article]:
        """Find an article by ID."""
        return self._articles.get(article_id)

    async def find_by_ids(
        self, article_ids: Sequence[ArticleId]
    ) -> dict[ArticleId, Article]:
        """Batch lookup of articles keyed by ID."""
        return {
            aid: self._articles[aid] for aid in article_ids if aid in self._articles
        }

    async def save(self, article: Article) -> Article:
        """Save or update an article."""
        self._articles[article.id] = article
        return article

    async def delete(self, article_id: ArticleId) -> None:
        """Remove an article (test helper for vanished-article paths)."""
        self._articles.pop(article_id, None)
