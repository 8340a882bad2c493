"""Liveness endpoint reporting database reachability."""

import asyncio

from fastapi import APIRouter, Depends

from helpchat.rag import RAGEngine
from helpchat.routes.chat import get_rag_engine
from helpchat.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health(rag: RAGEngine = Depends(get_rag_engine)):
    connected = await asyncio.to_thread(rag.retriever.ping)
    return HealthResponse(
        status="ok" if connected else "degraded",
        database="connected" if connected else "disconnected",
    )
