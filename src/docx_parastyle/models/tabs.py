"""
Tab stop model classes for paragraph formatting.

A paragraph carries an ordered set of custom tab stops (``<w:tabs>``). Each
stop has a type (alignment), a position in twips and an optional leader.
Unknown types and leaders are dropped rather than rejected, matching the
permissive handling of the rest of the paragraph style.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any

from ..constants import TAB_LEADERS, TAB_STOP_TYPES

logger = logging.getLogger(__name__)


def _is_number(value: Any) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)


def _to_position(value: Any) -> int:
    """Read a tab position in twips; anything non-numeric becomes 0."""
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return 0
    if _is_number(value) and math.isfinite(value):
        return int(value)
    return 0


@dataclass
class TabStop:
    """A single custom tab stop.

    Attributes:
        stop_type: Tab alignment ("left", "right", "center", "decimal",
            "bar", "num") or "clear" to remove an inherited stop. None when
            the supplied type was not recognized.
        position: Position from the leading edge of the paragraph, in twips
        leader: Leader character style ("dot", "hyphen", ...), or None

    Example:
        >>> stop = TabStop("right", 9360, "dot")
        >>> stop.position
        9360
    """

    stop_type: str | None = None
    position: int = 0
    leader: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.stop_type, str) or self.stop_type not in TAB_STOP_TYPES:
            self.stop_type = None
        self.position = _to_position(self.position)
        if not isinstance(self.leader, str) or self.leader not in TAB_LEADERS:
            self.leader = None

    @classmethod
    def from_value(cls, raw: Any) -> TabStop | None:
        """Build a tab stop from loosely structured input.

        Accepted forms:
            - a TabStop (returned as is)
            - a mapping with "type" or "val", "position" or "pos", "leader"
            - a sequence ``(type, position)`` or ``(type, position, leader)``
            - a bare number, read as the position of a left tab stop

        Args:
            raw: The value to interpret

        Returns:
            The TabStop, or None if ``raw`` has none of the shapes above
        """
        if isinstance(raw, TabStop):
            return raw
        if isinstance(raw, Mapping):
            return cls(
                stop_type=raw.get("type", raw.get("val")),
                position=raw.get("position", raw.get("pos", 0)),
                leader=raw.get("leader"),
            )
        if isinstance(raw, list | tuple) and 1 <= len(raw) <= 3:
            return cls(*raw)
        if _is_number(raw):
            return cls(stop_type="left", position=raw)
        return None


class Tabs:
    """Ordered collection of tab stops for one paragraph.

    Entries are normalized through :meth:`TabStop.from_value`; entries that
    cannot be read are skipped and logged.

    Example:
        >>> tabs = Tabs([{"type": "left", "position": 720}, ("right", 9360, "dot")])
        >>> len(tabs)
        2
        >>> tabs[1].leader
        'dot'
    """

    def __init__(self, entries: Iterable[Any] = ()) -> None:
        self._stops: list[TabStop] = []
        for index, entry in enumerate(entries):
            stop = TabStop.from_value(entry)
            if stop is None:
                logger.warning(f"Skipping unreadable tab stop at index {index}: {entry!r}")
                continue
            self._stops.append(stop)

    @property
    def stops(self) -> list[TabStop]:
        """A copy of the tab stops in order."""
        return list(self._stops)

    def __len__(self) -> int:
        return len(self._stops)

    def __iter__(self) -> Iterator[TabStop]:
        return iter(self._stops)

    def __getitem__(self, index: int) -> TabStop:
        return self._stops[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tabs):
            return NotImplemented
        return self._stops == other._stops

    def __repr__(self) -> str:
        return f"<Tabs stops={self._stops!r}>"
