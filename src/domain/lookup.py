"""
Name-based location lookup.

Matching
--------
Both the query and every candidate label are normalised the same way:

1. Unicode canonical decomposition (NFD) -- ``"é"`` becomes ``"e"`` +
   U+0301 COMBINING ACUTE ACCENT.
2. All combining marks are dropped.  Step 1 must run first, otherwise a
   precomposed ``"é"`` has no separate mark to strip.
3. Lower-casing.

A candidate matches when its normalised label *contains* the normalised
query.  The primary label of every record is scanned first, in list
order; only if nothing matches is the fallback label scanned.  The first
hit wins -- there is no ranking beyond list position.

Complexity: O(N) per lookup; labels are normalised once at build time.
"""

from __future__ import annotations

import logging
import unicodedata
from typing import Iterable, Optional

from .entities import Location

logger = logging.getLogger(__name__)


def normalize_name(text: str) -> str:
    decomposed = unicodedata.normalize("NFD", text)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.lower()


class LocationIndex:
    def __init__(self, locations: Iterable[Location]):
        self._locations: tuple[Location, ...] = tuple(locations)
        self._primary = [
            normalize_name(loc.name) if loc.name else None
            for loc in self._locations
        ]
        self._fallback = [
            normalize_name(loc.alt_name) if loc.alt_name else None
            for loc in self._locations
        ]

    def __len__(self) -> int:
        return len(self._locations)

    @property
    def locations(self) -> tuple[Location, ...]:
        return self._locations

    def find_by_name(self, query: Optional[str]) -> Optional[Location]:
        """Return the first location whose label contains *query*, else ``None``."""
        target = _prepare(query)
        if target is None:
            return None

        for labels in (self._primary, self._fallback):
            for i, label in enumerate(labels):
                if label is not None and target in label:
                    return self._locations[i]

        logger.debug("No location matches %r", query)
        return None

    def search(self, query: Optional[str], limit: int = 10) -> list[Location]:
        """All locations matching on either label, in list order, capped at *limit*."""
        target = _prepare(query)
        if target is None or limit <= 0:
            return []

        hits: list[Location] = []
        for loc, primary, fallback in zip(
            self._locations, self._primary, self._fallback
        ):
            if (primary is not None and target in primary) or (
                fallback is not None and target in fallback
            ):
                hits.append(loc)
                if len(hits) >= limit:
                    break
        return hits


def _prepare(query: Optional[str]) -> Optional[str]:
    if query is None:
        return None
    query = query.strip()
    if not query:
        return None
    # a query made only of combining marks normalises to ""
    return normalize_name(query) or None
