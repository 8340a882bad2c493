"""Prompt text and composition for the help desk model."""

from typing import List

from helpchat.schemas import Article

NO_DOCUMENTATION_NOTICE = (
    "No specific website help documentation was found for this query. "
    "Inform the user that specific help documentation is unavailable, "
    "and suggest they check the homepage or contact support."
)

SUPPORT_PROMPT = """You are a friendly and helpful website support chatbot for {site_name}.
Your primary task is to use the provided CONTEXT below to answer the user's query about the website.

RULES:
1. Answer concisely, professionally, and in a natural, conversational tone.
2. Base your response ONLY on the provided CONTEXT. Do not invent information.
3. If the context is insufficient or irrelevant, state politely that the answer could not be found in the help documents, and suggest they check the homepage or contact support.

--- CONTEXT ---
{context}

--- USER QUERY ---
{query}
"""


def format_article(index: int, article: Article) -> str:
    return f"--- DOCUMENT {index}: {article.title} ---\n{article.content}"


def format_context(articles: List[Article]) -> str:
    if not articles:
        return NO_DOCUMENTATION_NOTICE
    return "\n\n".join(format_article(i, a) for i, a in enumerate(articles, start=1))


def build_prompt(query: str, articles: List[Article], site_name: str = "Osmosis Learn") -> str:
    return SUPPORT_PROMPT.format(
        site_name=site_name,
        context=format_context(articles),
        query=query,
    )
