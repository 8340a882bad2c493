"""Keyword retrieval over the help article table.

The query is split into lowercase keywords; every keyword is matched as a
substring against the content, title and keywords columns, and the most
recently updated matches are returned. Database failures are logged and
turned into an empty result so the chat can still answer without context.
"""

import asyncio
import logging
from typing import List

from sqlalchemy import Select, or_, select, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from helpchat.db import help_articles
from helpchat.schemas import Article

logger = logging.getLogger(__name__)

MIN_KEYWORD_LENGTH = 3
MAX_ARTICLES = 3


def extract_keywords(query: str) -> List[str]:
    return [word for word in query.lower().split() if len(word) >= MIN_KEYWORD_LENGTH]


def build_search_statement(keywords: List[str], limit: int = MAX_ARTICLES) -> Select:
    if not keywords:
        raise ValueError("At least one keyword is required to build a search")

    conditions = []
    for keyword in keywords:
        pattern = f"%{keyword}%"
        conditions.append(
            or_(
                help_articles.c.content.like(pattern),
                help_articles.c.title.like(pattern),
                help_articles.c.keywords.like(pattern),
            )
        )

    return (
        select(help_articles.c.title, help_articles.c.content)
        .where(or_(*conditions))
        .order_by(help_articles.c.last_updated.desc(), help_articles.c.title.asc())
        .limit(limit)
    )


class ArticleRetriever:
    def __init__(self, engine: Engine, limit: int = MAX_ARTICLES):
        self.engine = engine
        self.limit = limit

    def retrieve(self, query: str) -> List[Article]:
        keywords = extract_keywords(query)
        if not keywords:
            logger.info("No usable keywords in query, skipping retrieval")
            return []

        statement = build_search_statement(keywords, self.limit)
        try:
            with self.engine.connect() as conn:
                rows = conn.execute(statement).all()
        except Exception as e:
            logger.error(f"Database retrieval error: {e}", exc_info=True)
            return []

        articles = [Article(title=row.title, content=row.content) for row in rows]
        logger.info(f"Retrieval complete | keywords={len(keywords)} | articles={len(articles)}")
        return articles

    async def retrieve_async(self, query: str) -> List[Article]:
        return await asyncio.to_thread(self.retrieve, query)

    def ping(self) -> bool:
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError as e:
            logger.warning(f"Database ping failed: {e}")
            return False

    def close(self):
        self.engine.dispose()
        logger.info("Database pool disposed")
