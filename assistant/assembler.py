from __future__ import annotations

from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional

from assistant.core.prompt import SYSTEM_PROMPT, build_vehicle_note
from config.settings import Settings


# Only the last N turns of the frontend-managed history are forwarded
HISTORY_WINDOW = 8

# Application roles -> Gemini roles; anything not listed is sent as "user"
GEMINI_ROLES: Mapping[str, str] = MappingProxyType({"assistant": "model", "user": "user"})
DEFAULT_GEMINI_ROLE = "user"


def to_gemini_role(role: Optional[str]) -> str:
    return GEMINI_ROLES.get(role or "", DEFAULT_GEMINI_ROLE)


def _content(role: str, text: str) -> Dict[str, Any]:
    return {"role": role, "parts": [{"text": text}]}


def assemble_contents(
    current_message: str,
    history: Optional[Iterable[dict]] = None,
    vehicle: Optional[str] = None,
) -> List[Dict[str, Any]]:
    """Build the ordered Gemini ``contents`` list for one chat request.

    Order: system instructions, vehicle note (if any), recent history,
    current message. Gemini has no system role inside ``contents``, so the
    instructions and the note travel as user turns.
    """
    contents: List[Dict[str, Any]] = [_content(DEFAULT_GEMINI_ROLE, SYSTEM_PROMPT)]

    if vehicle:
        contents.append(_content(DEFAULT_GEMINI_ROLE, build_vehicle_note(vehicle)))

    for turn in list(history or [])[-HISTORY_WINDOW:]:
        contents.append(_content(to_gemini_role(turn.get("role")), turn.get("content") or ""))

    contents.append(_content(DEFAULT_GEMINI_ROLE, current_message))
    return contents


def build_request_body(contents: List[Dict[str, Any]], settings: Settings) -> Dict[str, Any]:
    body: Dict[str, Any] = {"contents": contents}
    generation_config: Dict[str, float] = {}
    if settings.temperature is not None:
        generation_config["temperature"] = settings.temperature
    if settings.top_p is not None:
        generation_config["topP"] = settings.top_p
    if generation_config:
        body["generationConfig"] = generation_config
    return body
