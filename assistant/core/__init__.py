from .prompt import FALLBACK_REPLY, SYSTEM_PROMPT, build_vehicle_note
from .vehicle import DEFAULT_LEXICON, VehicleLexicon, detect_vehicle

__all__ = [
    "DEFAULT_LEXICON",
    "FALLBACK_REPLY",
    "SYSTEM_PROMPT",
    "VehicleLexicon",
    "build_vehicle_note",
    "detect_vehicle",
]
