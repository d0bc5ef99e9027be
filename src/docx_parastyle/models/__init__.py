"""
Style model classes for docx_parastyle.

These classes hold paragraph formatting values ready for rendering as OOXML.
"""

from docx_parastyle.models.paragraph_style import ParagraphStyle
from docx_parastyle.models.tabs import TabStop, Tabs

__all__ = [
    "ParagraphStyle",
    "TabStop",
    "Tabs",
]
