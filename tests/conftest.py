"""
Pytest configuration and shared fixtures.

Retrieval runs against an in-memory SQLite copy of the help article table;
the Gemini SDK is replaced by a MagicMock so no network calls are made.
"""

from datetime import datetime
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from helpchat.llm import GeminiClient
from helpchat.load_articles import load_articles
from helpchat.prompts import NO_DOCUMENTATION_NOTICE
from helpchat.rag import RAGEngine
from helpchat.retriever import ArticleRetriever

NOT_FOUND_ANSWER = "Sorry, I couldn't find that in our help documents. Please check the homepage or contact support."
FOUND_ANSWER = "You can request a refund within 14 days from Account > Orders."

SEED_ARTICLES = [
    {
        "title": "Refunds",
        "content": "Our refund policy allows a full refund within 14 days. Open Account > Orders to request one.",
        "keywords": "refund, money back",
        "last_updated": datetime(2025, 9, 12, 10, 0),
    },
    {
        "title": "Resetting your password",
        "content": "Use Forgot password on the sign-in page to reset access to your account.",
        "keywords": "password, login",
        "last_updated": datetime(2025, 8, 3, 9, 30),
    },
    {
        "title": "Downloading certificates",
        "content": "Certificates are available under My Learning once a course is complete.",
        "keywords": "certificate, pdf",
        "last_updated": datetime(2025, 7, 21, 15, 45),
    },
    {
        "title": "Changing your subscription plan",
        "content": "Manage your plan from Account > Billing. Cancelling does not issue a refund for the current period.",
        "keywords": "subscription, billing",
        "last_updated": datetime(2025, 6, 30, 12, 0),
    },
    {
        "title": "Contacting support",
        "content": "Our team answers messages within one business day.",
        "keywords": "help, account, support",
        "last_updated": datetime(2025, 5, 1, 8, 0),
    },
]


def _fake_generate(model, contents):
    if NO_DOCUMENTATION_NOTICE in contents:
        return SimpleNamespace(text=NOT_FOUND_ANSWER)
    return SimpleNamespace(text=FOUND_ANSWER)


@pytest.fixture
def db_engine():
    """In-memory SQLite engine shared across threads, seeded with articles."""
    engine = create_engine(
        "sqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    load_articles(engine, SEED_ARTICLES)
    yield engine
    engine.dispose()


@pytest.fixture
def genai_client():
    """Stand-in for google.genai.Client."""
    client = MagicMock()
    client.models.generate_content.side_effect = _fake_generate
    return client


@pytest.fixture
def retriever(db_engine):
    return ArticleRetriever(db_engine)


@pytest.fixture
def rag_engine(retriever, genai_client):
    return RAGEngine(retriever, GeminiClient(client=genai_client, model="gemini-test"))


@pytest.fixture
def client(rag_engine):
    """FastAPI test client with the RAG engine injected (lifespan not run)."""
    from helpchat.main import app
    from helpchat.routes.chat import get_rag_engine

    app.dependency_overrides[get_rag_engine] = lambda: rag_engine
    yield TestClient(app)
    app.dependency_overrides.clear()
