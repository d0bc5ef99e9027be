"""
Centralized constants for OOXML namespaces and paragraph unit conventions.

This module consolidates the namespace URL, namespace map, unit factors and
keyword vocabularies used by the paragraph style model and the pPr builder.
Import from here to keep the twips arithmetic consistent.
"""

# =============================================================================
# Word Processing Namespaces
# =============================================================================

# Main WordprocessingML namespace (Word 2007+)
WORD_NAMESPACE = "http://schemas.openxmlformats.org/wordprocessingml/2006/main"

# Basic namespace map with just the main Word namespace
NSMAP = {"w": WORD_NAMESPACE}


# =============================================================================
# Units
# =============================================================================

# Twips for one line at 100% line height (w:spacing/@w:line with lineRule="auto")
LINE_HEIGHT = 240

# Twips per indentation level (0.5 inch)
INDENT_TWIPS = 720


# =============================================================================
# Style Defaults
# =============================================================================

DEFAULT_BASED_ON = "Normal"

# Alignment keyword accepted from callers and the w:jc token it becomes
JUSTIFY = "justify"
JUSTIFY_TOKEN = "both"


# =============================================================================
# Tab Stops
# =============================================================================

# Valid w:tab/@w:val values
TAB_STOP_TYPES = frozenset(
    {
        "clear",
        "left",
        "right",
        "center",
        "decimal",
        "bar",
        "num",
    }
)

# Valid w:tab/@w:leader values
TAB_LEADERS = frozenset(
    {
        "none",
        "dot",
        "hyphen",
        "underscore",
        "heavy",
        "middleDot",
    }
)


# =============================================================================
# Helper Functions
# =============================================================================


def w(tag: str) -> str:
    """Create a fully qualified WordprocessingML tag name.

    Args:
        tag: The local tag name (e.g., "spacing", "jc")

    Returns:
        The Clark-notation tag (e.g., "{http://...}spacing")

    Example:
        >>> w("ind")
        '{http://schemas.openxmlformats.org/wordprocessingml/2006/main}ind'
    """
    return f"{{{WORD_NAMESPACE}}}{tag}"
