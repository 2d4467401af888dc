"""PostgreSQL implementation of Article repository."""

from typing import Optional, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from blog.domain.model import Article
from blog.domain.repository import ArticleRepository
from blog.domain.value import ArticleId
from blog.persistence.mappers import article_to_dict, row_to_article
from blog.persistence.tables import articles_table


class PostgresArticleRepository(ArticleRepository):
    """PostgreSQL implementation of ArticleRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, article_id: ArticleId) -> Optional[Article]:
        """Find an article by ID."""
        stmt = select(articles_table).where(articles_table.c.id == article_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_article(dict(row)) if row else None

    async def find_by_ids(
        self, article_ids: Sequence[ArticleId]
    ) -> dict[ArticleId, Article]:
        """Batch lookup of articles keyed by ID."""
        if not article_ids:
            return {}

        stmt = select(articles_table).where(articles_table.c.id.in_(list(article_ids)))
        result = await self.session.execute(stmt)
        articles = [row_to_article(dict(row)) for row in result.mappings().all()]
        return {article.id: article for article in articles}

    async def save(self, article: Article) -> Article:
        """Save an article (create or update)."""
        existing = await self.find_by_id(article.id)

        article_dict = article_to_dict(article)

        if existing:
            stmt = (
                articles_table.update()
                .where(articles_table.c.id == article.id)
                .values(**article_dict)
            )
        else:
            stmt = articles_table.insert().values(**article_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return article
