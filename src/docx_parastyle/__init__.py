"""
docx_parastyle - Paragraph formatting model for WordprocessingML documents.

This package provides a paragraph style record that collects alignment,
spacing, indentation, tab stops and pagination settings, converts them to
twips, and renders them as a ``<w:pPr>`` element.

Example:
    >>> from docx_parastyle import ParagraphStyle, to_xml
    >>> style = ParagraphStyle.from_style_map({"align": "justify", "line-height": 1.5})
    >>> style.align, style.spacing
    ('both', 360.0)
    >>> print(to_xml(style))
"""

__version__ = "0.1.0"
__all__ = [
    "ParagraphStyle",
    "TabStop",
    "Tabs",
    "ParagraphPropertyBuilder",
    "to_xml",
    "load_style_map",
    "load_paragraph_style",
    "DocxStyleError",
    "InvalidStyleError",
    "StyleMapError",
]

from .errors import DocxStyleError, InvalidStyleError, StyleMapError
from .format_builder import ParagraphPropertyBuilder, to_xml
from .models.paragraph_style import ParagraphStyle
from .models.tabs import TabStop, Tabs
from .style_map import load_paragraph_style, load_style_map
