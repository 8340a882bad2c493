"""FastAPI application entrypoint with RAG engine lifecycle management."""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles

from helpchat.config import Settings
from helpchat.logging_config import setup_logging
from helpchat.rag import RAGEngine
from helpchat.routes import chat_router, health_router
from helpchat.routes.chat import INTERNAL_ERROR_MESSAGE

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).parent / "static"

INVALID_JSON_MESSAGE = "Invalid JSON body format"
INVALID_QUERY_MESSAGE = "Query is required and must be a string."


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = Settings.load()
    setup_logging(settings.log_level)
    app.state.rag = RAGEngine.from_settings(settings)
    yield
    app.state.rag.close()


app = FastAPI(title="Help Desk RAG Chat", lifespan=lifespan)

app.include_router(chat_router)
app.include_router(health_router)
app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")


@app.get("/", include_in_schema=False)
async def index():
    return FileResponse(STATIC_DIR / "index.html")


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(_request: Request, exc: RequestValidationError):
    """Reject malformed bodies with 400 and a single message instead of 422."""
    errors = exc.errors()
    logger.warning(f"Rejected chat request | errors={len(errors)}")

    # An empty body surfaces as a missing body rather than a JSON decode error
    if any(
        error.get("type") == "json_invalid"
        or (error.get("type") == "missing" and tuple(error.get("loc", ())) == ("body",))
        for error in errors
    ):
        message = INVALID_JSON_MESSAGE
    else:
        message = INVALID_QUERY_MESSAGE
    return JSONResponse(status_code=400, content={"message": message})


@app.exception_handler(Exception)
async def global_exception_handler(_request: Request, exc: Exception):
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(status_code=500, content={"message": INTERNAL_ERROR_MESSAGE})


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("helpchat.main:app", host="127.0.0.1", port=8000)
