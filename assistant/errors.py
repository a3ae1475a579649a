from __future__ import annotations

from typing import Any, Dict, Optional


class AssistantError(Exception):
    """Base error turned into a ``{"error", "details"}`` JSON body at the API boundary."""

    status_code: int = 500
    error: str = "Error interno del servidor"

    def __init__(self, details: Any = None, error: Optional[str] = None) -> None:
        if error is not None:
            self.error = error
        self.details = details
        super().__init__(self.error)

    def to_body(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"error": self.error}
        if self.details is not None:
            body["details"] = self.details
        return body


class InvalidMessageError(AssistantError):
    status_code = 400
    error = "Mensaje inválido"


class MissingConfigurationError(AssistantError):
    error = "Falta configuración de IA (Gemini)"


class GeminiAPIError(AssistantError):
    error = "Error llamando al modelo de IA (Gemini)"

    def __init__(self, details: Any = None, upstream_status: Optional[int] = None) -> None:
        super().__init__(details)
        # None when the request never got a response (network failure)
        self.upstream_status = upstream_status


class InvalidHistoryError(AssistantError):
    status_code = 400
    error = "Historial inválido"
