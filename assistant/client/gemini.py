from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional

import httpx

from assistant.errors import GeminiAPIError


logger = logging.getLogger(__name__)

REQUEST_TIMEOUT = 30.0


def _error_detail(response: httpx.Response) -> Any:
    try:
        return response.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return {"message": response.text}


def extract_text(data: Any) -> Optional[str]:
    """Join the text parts of the first candidate, or None when there is nothing usable.

    Raises TypeError when a part carries a non-string ``text``.
    """
    if not isinstance(data, dict):
        return None
    candidates = data.get("candidates") or []
    if not isinstance(candidates, list) or not candidates:
        return None
    first = candidates[0] if isinstance(candidates[0], dict) else {}
    content = first.get("content") or {}
    parts = content.get("parts") if isinstance(content, dict) else None
    if not isinstance(parts, list):
        return None

    segments = []
    for part in parts:
        value = part.get("text") if isinstance(part, dict) else None
        if value is None:
            value = ""
        if not isinstance(value, str):
            raise TypeError(f"part text must be a string, got {type(value).__name__}")
        segments.append(value)

    text = "\n".join(segments).strip()
    return text or None


def generate_content(
    body: Dict[str, Any],
    *,
    api_key: str,
    model: str,
    api_base: str,
    client: Optional[httpx.Client] = None,
) -> Optional[str]:
    """POST one generateContent request and return the reply text.

    Raises GeminiAPIError on transport failures, non-success statuses and
    unparseable success bodies. Returns None when the reply carries no text.
    """
    endpoint = f"{api_base}/models/{model}:generateContent"
    headers = {"Content-Type": "application/json", "x-goog-api-key": api_key}

    owns_client = client is None
    http = client or httpx.Client(timeout=REQUEST_TIMEOUT)
    try:
        response = http.post(endpoint, json=body, headers=headers)
    except httpx.HTTPError as exc:
        raise GeminiAPIError({"message": f"Gemini API call failed: {exc}"}) from exc
    finally:
        if owns_client:
            http.close()

    logger.info("Gemini response status: %s", response.status_code)

    if not response.is_success:
        detail = _error_detail(response)
        logger.error("Gemini call failed: %s", detail)
        raise GeminiAPIError(detail, upstream_status=response.status_code)

    try:
        data = response.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise GeminiAPIError(
            {"message": f"Malformed Gemini response: {exc}"},
            upstream_status=response.status_code,
        ) from exc

    try:
        return extract_text(data)
    except TypeError as exc:
        raise GeminiAPIError(
            {"message": f"Malformed Gemini response: {exc}"},
            upstream_status=response.status_code,
        ) from exc
