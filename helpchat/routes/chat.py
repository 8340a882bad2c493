"""Help desk chat endpoint."""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from helpchat.rag import RAGEngine
from helpchat.schemas import ChatRequest, ChatResponse, ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["chat"])

INTERNAL_ERROR_MESSAGE = (
    "An internal server error occurred during processing. Check server logs for details."
)


async def get_rag_engine(request: Request) -> RAGEngine:
    return request.app.state.rag


@router.post(
    "/chat",
    response_model=ChatResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Malformed body or missing query"},
        500: {"model": ErrorResponse, "description": "Generation or internal failure"},
    },
)
async def chat(body: ChatRequest, rag: RAGEngine = Depends(get_rag_engine)):
    """
    Answer a help desk question.

    Retrieval failures degrade to an answer without context; any other
    failure returns 500 with a generic message and no partial payload.
    """
    try:
        result = await rag.ask_async(body.query)
    except Exception as e:
        logger.error(f"Gemini API or overall execution error: {e}", exc_info=True)
        return JSONResponse(status_code=500, content={"message": INTERNAL_ERROR_MESSAGE})

    return ChatResponse(answer=result.answer, context_used=result.context_used)
