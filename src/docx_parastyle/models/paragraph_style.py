"""
Paragraph style model for WordprocessingML paragraph properties.

ParagraphStyle holds the paragraph-level formatting a writer needs to emit a
``<w:pPr>`` block: alignment, spacing, indentation, tab stops, the parent and
next style names, and the pagination toggles. Values are set one at a time
through properties and ``set_*`` methods, or in bulk from a style map such as
``{"align": "justify", "indent": 1, "line-height": 1.5}``.

Units:
    - space_before, space_after, spacing, indent, hanging are twips
      (1/20 point).
    - line_height is a multiplier (1.0 = single spacing); setting it derives
      ``spacing = line_height * 240``.
    - Style map values for "indent" and "hanging" are indentation levels and
      are multiplied by 720 (0.5 inch per level). A style map "spacing" is
      extra space on top of single line spacing, so 240 is added.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Callable, Mapping
from typing import Any

from ..constants import (
    DEFAULT_BASED_ON,
    INDENT_TWIPS,
    JUSTIFY,
    JUSTIFY_TOKEN,
    LINE_HEIGHT,
)
from ..errors import InvalidStyleError
from .tabs import Tabs

logger = logging.getLogger(__name__)

# Value types accepted from style maps
StyleValue = str | int | float | bool | list[Any] | tuple[Any, ...] | Tabs | None

_NON_NUMERIC_CHARS = re.compile(r"[^0-9.,]")
_LEADING_NUMBER = re.compile(r"\d+(?:\.\d*)?|\.\d+")


def _is_number(value: Any) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)


def _parse_line_height(value: Any) -> Any:
    """Read a line height from text such as "1.5", "150%" or "1.5 lines".

    Every character other than digits, dots and commas is removed and the
    leading decimal number is read. Text without one reads as 0.0. Non-text
    values are returned unchanged.
    """
    if not isinstance(value, str):
        return value
    match = _LEADING_NUMBER.match(_NON_NUMERIC_CHARS.sub("", value))
    return float(match.group()) if match else 0.0


def _to_number(value: Any) -> int | float | None:
    """Read a numeric style map value; None if it is not a number."""
    if _is_number(value):
        return value
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            return None
    return None


class ParagraphStyle:
    """Paragraph-level formatting attributes.

    A new instance has every optional attribute unset (None), ``based_on``
    set to "Normal", ``widow_control`` on and the other pagination toggles
    off.

    Only the line height is validated. Boolean toggles silently fall back to
    their defaults on non-bool input, and unknown style map keys are ignored.

    Example:
        >>> style = ParagraphStyle()
        >>> style.apply_style_map({"align": "Justify", "indent": 1, "line-height": 1.5})
        <ParagraphStyle based_on='Normal' align='both' line_height=1.5>
        >>> style.indent, style.spacing
        (720, 360.0)
    """

    def __init__(self) -> None:
        self._line_height: int | float | None = None
        self._align: str | None = None
        self._space_before: int | None = None
        self._space_after: int | None = None
        self._spacing: int | float | None = None
        self._tabs: Tabs | None = None
        self._indent: int | float | None = None
        self._hanging: int | float | None = None
        self._based_on: str = DEFAULT_BASED_ON
        self._next: str | None = None
        self._widow_control: bool = True
        self._keep_next: bool = False
        self._keep_lines: bool = False
        self._page_break_before: bool = False

    @classmethod
    def from_style_map(cls, style_map: Mapping[str, StyleValue]) -> ParagraphStyle:
        """Create a style and apply ``style_map`` to it."""
        return cls().apply_style_map(style_map)

    # -------------------------------------------------------------------------
    # Bulk configuration
    # -------------------------------------------------------------------------

    def apply_style_map(self, style_map: Mapping[str, StyleValue]) -> ParagraphStyle:
        """Apply a mapping of style keys to values, in order.

        A leading underscore on a key is dropped, so internal-style keys such
        as "_align" work. Keys with no matching attribute are ignored.

        Args:
            style_map: Ordered mapping of style key to value

        Returns:
            This style, for chaining

        Raises:
            InvalidStyleError: If a line height entry is not a positive number
        """
        for key, value in style_map.items():
            if isinstance(key, str) and key.startswith("_"):
                key = key[1:]
            self.set_style_value(key, value)
        return self

    def set_style_value(self, key: str, value: StyleValue) -> ParagraphStyle:
        """Set one attribute by its style map key.

        Unit conversions apply to the exact keys "indent" and "hanging"
        (levels, times 720) and "spacing" (extra twips, plus 240). The key
        "line-height" goes straight to :meth:`set_line_height`. Other keys
        are matched case-insensitively against the known attributes; an
        unknown key, or a key that is not text, does nothing.

        Args:
            key: Style key, e.g. "align", "spaceAfter", "line-height"
            value: Value for the attribute

        Returns:
            This style, for chaining

        Raises:
            InvalidStyleError: If the key is a line height key and the value
                is not a positive number
        """
        if not isinstance(key, str):
            logger.debug(f"Ignoring non-text paragraph style key {key!r}")
            return self
        if key.startswith("_"):
            key = key[1:]

        if key in ("indent", "hanging", "spacing"):
            number = _to_number(value)
            if number is None:
                logger.warning(f"Ignoring non-numeric value {value!r} for '{key}'")
                return self
            if key == "spacing":
                value = number + LINE_HEIGHT
            else:
                value = number * INDENT_TWIPS
        elif key == "line-height":
            return self.set_line_height(value)

        setter = _STYLE_SETTERS.get(key.lower())
        if setter is None:
            logger.debug(f"Ignoring unknown paragraph style key '{key}'")
            return self
        return setter(self, value)

    # -------------------------------------------------------------------------
    # Alignment
    # -------------------------------------------------------------------------

    @property
    def align(self) -> str | None:
        """Paragraph alignment as a w:jc token ("justify" reads back as "both")."""
        return self._align

    @align.setter
    def align(self, value: str | None) -> None:
        self.set_align(value)

    def set_align(self, value: str | None = None) -> ParagraphStyle:
        if value is not None and str(value).lower() == JUSTIFY:
            value = JUSTIFY_TOKEN
        self._align = value
        return self

    # -------------------------------------------------------------------------
    # Line height
    # -------------------------------------------------------------------------

    @property
    def line_height(self) -> int | float | None:
        """Line height multiplier (1.0 = single spacing)."""
        return self._line_height

    @line_height.setter
    def line_height(self, value: int | float | str) -> None:
        self.set_line_height(value)

    def set_line_height(self, value: int | float | str) -> ParagraphStyle:
        """Set the line height and derive the line spacing from it.

        Text values are cleaned before parsing: every character other than
        digits, dots and commas is removed, so "150%" reads as 150.0 and
        "1.5 lines" as 1.5.

        Args:
            value: Positive multiplier, as a number or text

        Returns:
            This style, for chaining

        Raises:
            InvalidStyleError: If the value is not a positive finite number
                after parsing. The style is left unchanged.
        """
        line_height = _parse_line_height(value)
        if not _is_number(line_height) or not math.isfinite(line_height) or line_height <= 0:
            raise InvalidStyleError("Line height must be a valid number", "line-height", value)

        self._line_height = line_height
        self.set_spacing(line_height * LINE_HEIGHT)
        logger.debug(f"Line height {line_height} sets spacing to {self._spacing}")
        return self

    # -------------------------------------------------------------------------
    # Spacing
    # -------------------------------------------------------------------------

    @property
    def space_before(self) -> int | None:
        """Space before the paragraph, in twips."""
        return self._space_before

    @space_before.setter
    def space_before(self, value: int | None) -> None:
        self.set_space_before(value)

    def set_space_before(self, value: int | None = None) -> ParagraphStyle:
        self._space_before = value
        return self

    @property
    def space_after(self) -> int | None:
        """Space after the paragraph, in twips."""
        return self._space_after

    @space_after.setter
    def space_after(self, value: int | None) -> None:
        self.set_space_after(value)

    def set_space_after(self, value: int | None = None) -> ParagraphStyle:
        self._space_after = value
        return self

    @property
    def spacing(self) -> int | float | None:
        """Spacing between lines, in twips."""
        return self._spacing

    @spacing.setter
    def spacing(self, value: int | float | None) -> None:
        self.set_spacing(value)

    def set_spacing(self, value: int | float | None = None) -> ParagraphStyle:
        self._spacing = value
        return self

    # -------------------------------------------------------------------------
    # Indentation
    # -------------------------------------------------------------------------

    @property
    def indent(self) -> int | float | None:
        """Left indentation, in twips."""
        return self._indent

    @indent.setter
    def indent(self, value: int | float | None) -> None:
        self.set_indent(value)

    def set_indent(self, value: int | float | None = None) -> ParagraphStyle:
        self._indent = value
        return self

    @property
    def hanging(self) -> int | float | None:
        """Hanging indentation of all lines but the first, in twips."""
        return self._hanging

    @hanging.setter
    def hanging(self, value: int | float | None) -> None:
        self.set_hanging(value)

    def set_hanging(self, value: int | float | None = None) -> ParagraphStyle:
        self._hanging = value
        return self

    # -------------------------------------------------------------------------
    # Tabs
    # -------------------------------------------------------------------------

    @property
    def tabs(self) -> Tabs | None:
        """Custom tab stops, or None when none were set."""
        return self._tabs

    @tabs.setter
    def tabs(self, value: Any) -> None:
        self.set_tabs(value)

    def set_tabs(self, value: Any = None) -> ParagraphStyle:
        """Set custom tab stops from a list or tuple of tab stop entries.

        Any other input (including None) leaves the tab stops as they are.
        """
        if isinstance(value, Tabs):
            self._tabs = value
        elif isinstance(value, list | tuple):
            self._tabs = Tabs(value)
        else:
            logger.debug(f"Ignoring tab stops given as {type(value).__name__}")
        return self

    # -------------------------------------------------------------------------
    # Style linkage
    # -------------------------------------------------------------------------

    @property
    def based_on(self) -> str:
        """Name of the parent style."""
        return self._based_on

    @based_on.setter
    def based_on(self, value: str | None) -> None:
        self.set_based_on(value)

    def set_based_on(self, value: str | None = DEFAULT_BASED_ON) -> ParagraphStyle:
        # An empty parent name falls back to Normal
        self._based_on = value or DEFAULT_BASED_ON
        return self

    @property
    def next(self) -> str | None:
        """Name of the style applied to the following paragraph."""
        return self._next

    @next.setter
    def next(self, value: str | None) -> None:
        self.set_next(value)

    def set_next(self, value: str | None = None) -> ParagraphStyle:
        self._next = value
        return self

    # -------------------------------------------------------------------------
    # Pagination
    # -------------------------------------------------------------------------

    @property
    def widow_control(self) -> bool:
        """Prevent a first or last line from sitting alone on a page."""
        return self._widow_control

    @widow_control.setter
    def widow_control(self, value: bool) -> None:
        self.set_widow_control(value)

    def set_widow_control(self, value: bool = True) -> ParagraphStyle:
        if not isinstance(value, bool):
            value = True
        self._widow_control = value
        return self

    @property
    def keep_next(self) -> bool:
        """Keep the paragraph on the same page as the next one."""
        return self._keep_next

    @keep_next.setter
    def keep_next(self, value: bool) -> None:
        self.set_keep_next(value)

    def set_keep_next(self, value: bool = False) -> ParagraphStyle:
        if not isinstance(value, bool):
            value = False
        self._keep_next = value
        return self

    @property
    def keep_lines(self) -> bool:
        """Keep all lines of the paragraph on one page."""
        return self._keep_lines

    @keep_lines.setter
    def keep_lines(self, value: bool) -> None:
        self.set_keep_lines(value)

    def set_keep_lines(self, value: bool = False) -> ParagraphStyle:
        if not isinstance(value, bool):
            value = False
        self._keep_lines = value
        return self

    @property
    def page_break_before(self) -> bool:
        """Start the paragraph on a new page."""
        return self._page_break_before

    @page_break_before.setter
    def page_break_before(self, value: bool) -> None:
        self.set_page_break_before(value)

    def set_page_break_before(self, value: bool = False) -> ParagraphStyle:
        if not isinstance(value, bool):
            value = False
        self._page_break_before = value
        return self

    # -------------------------------------------------------------------------
    # Inspection
    # -------------------------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        """Return all attribute values keyed by attribute name."""
        return {
            "line_height": self._line_height,
            "align": self._align,
            "space_before": self._space_before,
            "space_after": self._space_after,
            "spacing": self._spacing,
            "tabs": self._tabs,
            "indent": self._indent,
            "hanging": self._hanging,
            "based_on": self._based_on,
            "next": self._next,
            "widow_control": self._widow_control,
            "keep_next": self._keep_next,
            "keep_lines": self._keep_lines,
            "page_break_before": self._page_break_before,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParagraphStyle):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        """String representation of the style."""
        return (
            f"<ParagraphStyle based_on={self._based_on!r} align={self._align!r} "
            f"line_height={self._line_height!r}>"
        )


# Style map keys (lower-cased) to setters. camelCase keys match the setter
# names case-insensitively; snake_case aliases mirror the attribute names.
_STYLE_SETTERS: dict[str, Callable[[ParagraphStyle, Any], ParagraphStyle]] = {
    "align": ParagraphStyle.set_align,
    "lineheight": ParagraphStyle.set_line_height,
    "line_height": ParagraphStyle.set_line_height,
    "spacebefore": ParagraphStyle.set_space_before,
    "space_before": ParagraphStyle.set_space_before,
    "spaceafter": ParagraphStyle.set_space_after,
    "space_after": ParagraphStyle.set_space_after,
    "spacing": ParagraphStyle.set_spacing,
    "tabs": ParagraphStyle.set_tabs,
    "indent": ParagraphStyle.set_indent,
    "hanging": ParagraphStyle.set_hanging,
    "basedon": ParagraphStyle.set_based_on,
    "based_on": ParagraphStyle.set_based_on,
    "next": ParagraphStyle.set_next,
    "widowcontrol": ParagraphStyle.set_widow_control,
    "widow_control": ParagraphStyle.set_widow_control,
    "keepnext": ParagraphStyle.set_keep_next,
    "keep_next": ParagraphStyle.set_keep_next,
    "keeplines": ParagraphStyle.set_keep_lines,
    "keep_lines": ParagraphStyle.set_keep_lines,
    "pagebreakbefore": ParagraphStyle.set_page_break_before,
    "page_break_before": ParagraphStyle.set_page_break_before,
}
