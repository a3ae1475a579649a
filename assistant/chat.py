from __future__ import annotations

import logging
from typing import Iterable, List, Optional, TypedDict

import httpx

from assistant.assembler import assemble_contents, build_request_body
from assistant.client import generate_content
from assistant.core import FALLBACK_REPLY, detect_vehicle
from assistant.errors import MissingConfigurationError
from config.settings import Settings


logger = logging.getLogger(__name__)


class ChatResult(TypedDict):
    text: str
    vehicle: Optional[str]


def run_chat(
    message: str,
    history: Optional[Iterable[dict]],
    settings: Settings,
    client: Optional[httpx.Client] = None,
) -> ChatResult:
    if not settings.gemini_api_key:
        raise MissingConfigurationError()

    # Nothing is kept between requests; the vehicle is re-detected every call
    turns: List[dict] = list(history or [])
    vehicle = detect_vehicle(turns, message)
    logger.info("Detected motorcycle: %s", vehicle or "none")

    contents = assemble_contents(message, turns, vehicle)
    body = build_request_body(contents, settings)
    text = generate_content(
        body,
        api_key=settings.gemini_api_key,
        model=settings.gemini_model,
        api_base=settings.gemini_api_base,
        client=client,
    )
    if not text:
        logger.warning("Gemini returned no usable text, sending fallback reply")
        text = FALLBACK_REPLY

    return {"text": text, "vehicle": vehicle}
