"""Tests for the offline article loader."""

import json
from datetime import datetime
from pathlib import Path

import pytest
from sqlalchemy import create_engine, func, select

from helpchat.db import help_articles
from helpchat.load_articles import load_articles, read_articles
from helpchat.retriever import ArticleRetriever

SAMPLE_FILE = Path(__file__).parent.parent / "data" / "help_articles.json"


@pytest.fixture
def empty_engine():
    engine = create_engine("sqlite://")
    yield engine
    engine.dispose()


def _count(engine) -> int:
    with engine.connect() as conn:
        return conn.execute(select(func.count()).select_from(help_articles)).scalar_one()


def test_reads_sample_file():
    rows = read_articles(SAMPLE_FILE)

    assert rows
    assert rows[0]["title"] == "Refunds"
    assert rows[0]["last_updated"] == datetime(2025, 9, 12, 10, 0)


def test_missing_timestamp_defaults_to_now(tmp_path):
    path = tmp_path / "articles.json"
    path.write_text(json.dumps([{"title": "FAQ", "content": "Answers."}]))

    row = read_articles(path)[0]

    assert row["keywords"] is None
    assert isinstance(row["last_updated"], datetime)
    assert row["last_updated"].tzinfo is None


def test_rejects_article_without_content(tmp_path):
    path = tmp_path / "articles.json"
    path.write_text(json.dumps([{"title": "Empty"}]))

    with pytest.raises(ValueError, match="missing a title or content"):
        read_articles(path)


def test_rejects_non_list(tmp_path):
    path = tmp_path / "articles.json"
    path.write_text(json.dumps({"title": "FAQ"}))

    with pytest.raises(ValueError):
        read_articles(path)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_articles(tmp_path / "nope.json")


def test_creates_table_and_inserts(empty_engine):
    rows = read_articles(SAMPLE_FILE)

    assert load_articles(empty_engine, rows) == len(rows)
    assert _count(empty_engine) == len(rows)

    titles = [a.title for a in ArticleRetriever(empty_engine).retrieve("refund policy")]
    assert titles[0] == "Refunds"


def test_replace_clears_existing_rows(empty_engine):
    rows = read_articles(SAMPLE_FILE)
    load_articles(empty_engine, rows)
    load_articles(empty_engine, rows[:1], replace=True)

    assert _count(empty_engine) == 1
