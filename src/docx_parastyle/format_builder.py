"""
Property builder for paragraph properties in Word documents.

This module renders a ParagraphStyle as a ``<w:pPr>`` element, or merges it
into an existing one, keeping child elements in schema order.
"""

import logging
import math
from collections.abc import Iterable
from copy import deepcopy
from typing import Any

from lxml import etree

from .constants import NSMAP
from .constants import w as _w
from .models.paragraph_style import ParagraphStyle
from .models.tabs import TabStop

logger = logging.getLogger(__name__)


def _to_twips(value: Any, attr: str) -> int | None:
    """Read a stored value as whole twips; None (logged) if it is not a finite number."""
    number = value
    if isinstance(number, str):
        try:
            number = float(number.strip())
        except ValueError:
            number = None
    if isinstance(number, int | float) and not isinstance(number, bool) and math.isfinite(number):
        return int(number)
    logger.warning(f"Skipping w:{attr}, {value!r} is not a number of twips")
    return None


class ParagraphPropertyBuilder:
    """Build and manipulate <w:pPr> (paragraph properties) elements.

    Rendered properties:
        - keepNext, keepLines, pageBreakBefore: emitted when on
        - widowControl: emitted with w:val="0" when off (Word's default is on)
        - tabs: one w:tab per tab stop
        - spacing: before, after, line (lineRule="auto")
        - ind: left from indent, hanging from hanging
        - jc: alignment
    """

    # OOXML schema requires pPr child elements in this specific order
    # See ISO/IEC 29500-1:2016 section 17.3.1.26 (pPr)
    PPR_ELEMENT_ORDER = [
        "pStyle",
        "keepNext",
        "keepLines",
        "pageBreakBefore",
        "framePr",
        "widowControl",
        "numPr",
        "suppressLineNumbers",
        "pBdr",
        "shd",
        "tabs",
        "suppressAutoHyphens",
        "kinsoku",
        "wordWrap",
        "overflowPunct",
        "topLinePunct",
        "autoSpaceDE",
        "autoSpaceDN",
        "bidi",
        "adjustRightInd",
        "snapToGrid",
        "spacing",  # Must come before jc
        "ind",
        "contextualSpacing",
        "mirrorIndents",
        "suppressOverlap",
        "jc",  # Alignment
        "textDirection",
        "textAlignment",
        "textboxTightWrap",
        "outlineLvl",
        "divId",
        "cnfStyle",
        "rPr",
        "sectPr",
        "pPrChange",  # Tracked change must be last
    ]

    @classmethod
    def _get_insert_position(cls, ppr: etree._Element, element_name: str) -> int:
        """Get the correct position to insert an element in pPr.

        Args:
            ppr: The parent pPr element
            element_name: Local name of element to insert (without namespace)

        Returns:
            Index position where the element should be inserted
        """
        try:
            target_order = cls.PPR_ELEMENT_ORDER.index(element_name)
        except ValueError:
            return len(ppr)

        for i, child in enumerate(ppr):
            child_name = etree.QName(child.tag).localname
            try:
                child_order = cls.PPR_ELEMENT_ORDER.index(child_name)
                if child_order > target_order:
                    return i
            except ValueError:
                # Unknown child, keep looking
                continue

        return len(ppr)

    @classmethod
    def _replace_child(cls, ppr: etree._Element, element_name: str) -> etree._Element:
        """Remove any existing child of this name and insert a fresh one in order."""
        existing = ppr.find(_w(element_name))
        if existing is not None:
            ppr.remove(existing)
        elem = etree.Element(_w(element_name))
        ppr.insert(cls._get_insert_position(ppr, element_name), elem)
        return elem

    @classmethod
    def build(cls, style: ParagraphStyle, nsmap: dict[str, str] | None = None) -> etree._Element:
        """Build a <w:pPr> element from a paragraph style.

        Args:
            style: The paragraph style to render
            nsmap: Namespace map to use (defaults to NSMAP)

        Returns:
            New <w:pPr> element with the style's properties

        Example:
            >>> style = ParagraphStyle.from_style_map({"align": "center", "line-height": 1.5})
            >>> ppr = ParagraphPropertyBuilder.build(style)
        """
        if nsmap is None:
            nsmap = NSMAP

        ppr = etree.Element(_w("pPr"), nsmap=nsmap)
        cls._apply_style(ppr, style)
        return ppr

    @classmethod
    def merge(cls, base: etree._Element | None, style: ParagraphStyle) -> etree._Element:
        """Merge a paragraph style into an existing <w:pPr>, returning a new element.

        Creates a deep copy of base (if provided) and applies the style.
        Any w:pPrChange in the copy is dropped, since it describes base.
        Properties the style renders replace the matching children of base;
        unrelated children of base (numPr, rPr, ...) are kept.

        Args:
            base: Existing <w:pPr> element (or None for empty)
            style: Paragraph style to apply

        Returns:
            New <w:pPr> element with merged properties
        """
        if base is None:
            return cls.build(style)

        ppr = deepcopy(base)
        # Remove any existing pPrChange from the copy
        for change in ppr.findall(_w("pPrChange")):
            ppr.remove(change)
        cls._apply_style(ppr, style)
        return ppr

    @classmethod
    def _apply_style(cls, ppr: etree._Element, style: ParagraphStyle) -> None:
        """Apply a paragraph style to a <w:pPr> element (in-place)."""
        for element_name, enabled in (
            ("keepNext", style.keep_next),
            ("keepLines", style.keep_lines),
            ("pageBreakBefore", style.page_break_before),
        ):
            if enabled:
                cls._replace_child(ppr, element_name)

        if not style.widow_control:
            widow = cls._replace_child(ppr, "widowControl")
            widow.set(_w("val"), "0")

        if style.tabs is not None and len(style.tabs):
            existing = ppr.find(_w("tabs"))
            if existing is not None:
                ppr.remove(existing)
            tabs = cls.tab_stops_to_element(style.tabs)
            ppr.insert(cls._get_insert_position(ppr, "tabs"), tabs)

        cls._set_spacing(ppr, style)
        cls._set_indent(ppr, style)

        if style.align is not None:
            jc = cls._replace_child(ppr, "jc")
            jc.set(_w("val"), str(style.align))

    @classmethod
    def _set_spacing(cls, ppr: etree._Element, style: ParagraphStyle) -> None:
        """Set before/after/line attributes on w:spacing.

        Values that are not finite numbers (or numeric text) are skipped with
        a warning; no w:spacing is added when nothing is left to write.
        """
        values: dict[str, int] = {}
        for attr, value in (
            ("before", style.space_before),
            ("after", style.space_after),
            ("line", style.spacing),
        ):
            if value is None:
                continue
            twips = _to_twips(value, attr)
            if twips is not None:
                values[attr] = twips
        if not values:
            return

        spacing = ppr.find(_w("spacing"))
        if spacing is None:
            spacing = etree.Element(_w("spacing"))
            ppr.insert(cls._get_insert_position(ppr, "spacing"), spacing)

        for attr, twips in values.items():
            spacing.set(_w(attr), str(twips))
        if "line" in values:
            # 240 = single, 360 = 1.5 lines, 480 = double
            spacing.set(_w("lineRule"), "auto")

    @classmethod
    def _set_indent(cls, ppr: etree._Element, style: ParagraphStyle) -> None:
        """Set left/hanging attributes on w:ind."""
        left = _to_twips(style.indent, "left") if style.indent is not None else None
        hanging = _to_twips(style.hanging, "hanging") if style.hanging is not None else None
        if left is None and hanging is None:
            return

        ind = ppr.find(_w("ind"))
        if ind is None:
            ind = etree.Element(_w("ind"))
            ppr.insert(cls._get_insert_position(ppr, "ind"), ind)

        if left is not None:
            ind.set(_w("left"), str(left))
        if hanging is not None:
            # hanging and firstLine are mutually exclusive
            if _w("firstLine") in ind.attrib:
                del ind.attrib[_w("firstLine")]
            ind.set(_w("hanging"), str(hanging))

    @staticmethod
    def tab_stops_to_element(tab_stops: Iterable[TabStop]) -> etree._Element:
        """Render tab stops as a <w:tabs> element.

        Stops without a recognized type are written as left tabs. A "none"
        leader is the schema default and is not written.

        Args:
            tab_stops: Tab stops in order (a Tabs collection or any iterable)

        Returns:
            The <w:tabs> element
        """
        tabs = etree.Element(_w("tabs"))
        for stop in tab_stops:
            tab = etree.SubElement(tabs, _w("tab"))
            tab.set(_w("val"), stop.stop_type or "left")
            tab.set(_w("pos"), str(stop.position))
            if stop.leader and stop.leader != "none":
                tab.set(_w("leader"), stop.leader)
        return tabs


def to_xml(style: ParagraphStyle, pretty_print: bool = True) -> str:
    """Render a paragraph style as a <w:pPr> XML string."""
    ppr = ParagraphPropertyBuilder.build(style)
    return etree.tostring(ppr, encoding="unicode", pretty_print=pretty_print)
