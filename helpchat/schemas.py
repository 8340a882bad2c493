"""Request/response models and the article record shared across modules."""

from dataclasses import dataclass
from typing import List

from pydantic import BaseModel, ConfigDict, Field, StrictStr


@dataclass(frozen=True)
class Article:
    title: str
    content: str


class ChatRequest(BaseModel):
    query: StrictStr = Field(..., min_length=1, description="Free-text question from the user")


class ChatResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    answer: str
    context_used: List[str] = Field(default_factory=list, alias="contextUsed")


class ErrorResponse(BaseModel):
    message: str


class HealthResponse(BaseModel):
    status: str
    database: str
