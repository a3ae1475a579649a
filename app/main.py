from __future__ import annotations

from typing import Dict, Iterator, List, Optional

import httpx
import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logging
from pydantic import BaseModel, Field, StrictStr

from assistant.chat import run_chat
from assistant.client.gemini import REQUEST_TIMEOUT
from assistant.errors import (
    AssistantError,
    GeminiAPIError,
    InvalidHistoryError,
    InvalidMessageError,
)
from config.settings import Settings, get_settings


logging.basicConfig(level=logging.INFO, format="[%(asctime)s] %(levelname)s - %(message)s")
logger = logging.getLogger("motofull")

app = FastAPI(title="Motofull Chat Assistant", version="1.0.0")

# CORS: allow the storefront frontend during development
settings = get_settings()
if settings.is_development:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


class ChatTurn(BaseModel):
    role: str = Field(..., description="'user' or 'assistant'")
    content: str


class ChatRequest(BaseModel):
    message: StrictStr = Field(..., min_length=1, description="User's latest message")
    history: Optional[List[ChatTurn]] = Field(
        default_factory=list,
        description="Previous turns of the chat session, oldest first (frontend-managed)",
    )


@app.exception_handler(RequestValidationError)
async def invalid_request_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    logger.warning("Rejected chat request: %s", errors)
    # Only blame the history when the message itself passed validation
    history_only = bool(errors) and all(
        tuple(err.get("loc", ()))[:2] == ("body", "history") for err in errors
    )
    error = InvalidHistoryError() if history_only else InvalidMessageError()
    return JSONResponse(status_code=error.status_code, content=error.to_body())


@app.exception_handler(AssistantError)
async def assistant_error_handler(request: Request, exc: AssistantError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


def get_gemini_client() -> Iterator[httpx.Client]:
    with httpx.Client(timeout=REQUEST_TIMEOUT) as client:
        yield client


@app.post("/api/motofull-chat")
def motofull_chat(
    req: ChatRequest,
    settings: Settings = Depends(get_settings),
    client: httpx.Client = Depends(get_gemini_client),
) -> Dict[str, str]:
    history = [t.model_dump() for t in (req.history or [])]
    logger.info(
        "Incoming chat: message_len=%s history_turns=%s",
        len(req.message),
        len(history),
    )
    logger.info(
        "Config: model=%s key_set=%s",
        settings.gemini_model,
        bool(settings.gemini_api_key),
    )

    try:
        result = run_chat(req.message, history, settings, client=client)
    except GeminiAPIError as exc:
        logger.error("Gemini call failed (status=%s): %s", exc.upstream_status, exc.details)
        raise
    except AssistantError as exc:
        logger.error("Chat request failed: %s", exc.error)
        raise
    except Exception as e:
        logger.exception("Chat processing failed: %s", e)
        raise AssistantError() from e

    logger.info("Model responded with %s chars", len(result["text"]))
    return {"text": result["text"]}


@app.get("/health")
def health():
    return {"status": "ok"}


if __name__ == "__main__":
    uvicorn.run("app.main:app", host="0.0.0.0", port=8000)
