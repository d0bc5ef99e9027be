"""
Loading paragraph style maps from YAML or JSON files.

A style map file holds the keys accepted by
:meth:`ParagraphStyle.apply_style_map`, either at the top level or under a
``paragraph`` key:

```yaml
paragraph:
  align: justify
  line-height: 1.5
  indent: 1
  keepNext: true
  tabs:
    - {type: right, position: 9360, leader: dot}
```
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from .errors import StyleMapError
from .models.paragraph_style import ParagraphStyle

logger = logging.getLogger(__name__)

SUFFIX_FORMATS = {
    ".yaml": "yaml",
    ".yml": "yaml",
    ".json": "json",
}


def load_style_map(path: str | Path, format: str | None = None) -> dict[str, Any]:
    """Load a style map from a YAML or JSON file.

    Args:
        path: Path to the style map file
        format: "yaml" or "json"; inferred from the file suffix when None
            (unknown suffixes are read as YAML)

    Returns:
        The style map, in file order

    Raises:
        StyleMapError: If the file cannot be parsed or is not a mapping
        FileNotFoundError: If the file does not exist

    Example:
        >>> style_map = load_style_map("heading.yaml")
        >>> style = ParagraphStyle.from_style_map(style_map)
    """
    file_path = Path(path)

    if not file_path.exists():
        raise FileNotFoundError(f"Style map file not found: {path}")

    if format is None:
        format = SUFFIX_FORMATS.get(file_path.suffix.lower(), "yaml")

    try:
        with open(file_path, encoding="utf-8") as f:
            if format == "yaml":
                data = yaml.safe_load(f)
            elif format == "json":
                data = json.load(f)
            else:
                raise StyleMapError(f"Unsupported format: {format}", str(file_path))
    except yaml.YAMLError as e:
        raise StyleMapError(f"Failed to parse YAML file: {e}", str(file_path)) from e
    except json.JSONDecodeError as e:
        raise StyleMapError(f"Failed to parse JSON file: {e}", str(file_path)) from e
    except UnicodeDecodeError as e:
        raise StyleMapError(f"Failed to read style map file: {e}", str(file_path)) from e

    if isinstance(data, dict) and "paragraph" in data:
        data = data["paragraph"]

    if not isinstance(data, dict):
        raise StyleMapError("Style map file must contain a dictionary/object", str(file_path))

    logger.debug(f"Loaded {len(data)} style keys from {file_path}")
    return data


def load_paragraph_style(path: str | Path, format: str | None = None) -> ParagraphStyle:
    """Build a ParagraphStyle from a style map file.

    Raises:
        StyleMapError: If the file cannot be loaded
        InvalidStyleError: If the line height in the file is not a positive number
        FileNotFoundError: If the file does not exist
    """
    return ParagraphStyle.from_style_map(load_style_map(path, format))
