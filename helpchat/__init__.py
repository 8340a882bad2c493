"""Keyword-retrieval help desk chatbot backed by MySQL and Gemini."""

__version__ = "0.1.0"
