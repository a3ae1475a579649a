from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, List, Optional, Pattern, Tuple


# Known brands used to spot the user's motorcycle in the conversation
KNOWN_BRANDS: Tuple[str, ...] = (
    "honda",
    "yamaha",
    "kawasaki",
    "suzuki",
    "ducati",
    "bmw",
    "ktm",
    "italika",
    "bajaj",
    "pulsar",
    "vento",
    "harley",
    "harley-davidson",
)

# Model years 1980-2039 as a standalone 4-digit token
YEAR_PATTERN: Pattern[str] = re.compile(r"\b(19[8-9]\d|20[0-3]\d)\b")


@dataclass(frozen=True)
class VehicleLexicon:
    brands: Tuple[str, ...] = KNOWN_BRANDS
    year_pattern: Pattern[str] = YEAR_PATTERN

    def mentions_vehicle(self, text: str) -> bool:
        lower = text.lower()
        has_brand = any(brand in lower for brand in self.brands)
        return has_brand and self.year_pattern.search(lower) is not None


DEFAULT_LEXICON = VehicleLexicon()


def _candidate_texts(history: Optional[Iterable[dict]], current_message: str) -> List[str]:
    texts: List[str] = []
    for turn in history or []:
        content = turn.get("content") or ""
        if turn.get("role") == "user" and content:
            texts.append(content)
    texts.append(current_message)
    return texts


def detect_vehicle(
    history: Optional[Iterable[dict]],
    current_message: str,
    lexicon: VehicleLexicon = DEFAULT_LEXICON,
) -> Optional[str]:
    """Return the most recent user text that names a known brand and a model year.

    Only user turns are considered, followed by the current message, which
    takes precedence over everything in the history. The whole sentence is
    returned verbatim; brand, model and year are not split out.
    """
    for text in reversed(_candidate_texts(history, current_message)):
        if lexicon.mentions_vehicle(text):
            return text
    return None
