"""Core RAG engine: keyword retrieval, prompt composition and Gemini generation."""

import logging
from dataclasses import dataclass, field
from typing import List

from helpchat.config import Settings
from helpchat.db import create_db_engine
from helpchat.llm import GeminiClient
from helpchat.logging_config import log_latency
from helpchat.prompts import build_prompt
from helpchat.retriever import ArticleRetriever

logger = logging.getLogger(__name__)


@dataclass
class ChatResult:
    answer: str
    context_used: List[str] = field(default_factory=list)


class RAGEngine:
    def __init__(self, retriever: ArticleRetriever, llm: GeminiClient, site_name: str = "Osmosis Learn"):
        self.retriever = retriever
        self.llm = llm
        self.site_name = site_name

    @classmethod
    def from_settings(cls, settings: Settings) -> "RAGEngine":
        retriever = ArticleRetriever(create_db_engine(settings))
        llm = GeminiClient(api_key=settings.gemini_api_key, model=settings.gemini_model)
        logger.info("RAGEngine initialized successfully")
        return cls(retriever, llm, site_name=settings.site_name)

    def close(self):
        self.retriever.close()
        self.llm.close()
        logger.info("RAGEngine resources closed")

    @log_latency("rag.ask_async")
    async def ask_async(self, query: str) -> ChatResult:
        logger.info(f"Query received | query_length={len(query)}")

        articles = await self.retriever.retrieve_async(query)
        if not articles:
            logger.info("No help articles matched, answering without context")

        prompt = build_prompt(query, articles, site_name=self.site_name)
        answer = await self.llm.generate_async(prompt)

        return ChatResult(answer=answer, context_used=[a.title for a in articles])
