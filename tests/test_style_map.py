"""
Tests for loading style maps from YAML and JSON files.
"""

import json
from pathlib import Path

import pytest

from docx_parastyle import (
    InvalidStyleError,
    ParagraphStyle,
    StyleMapError,
    load_paragraph_style,
    load_style_map,
)

YAML_STYLE = """
paragraph:
  align: justify
  line-height: 1.5
  indent: 1
  keepNext: true
  tabs:
    - {type: right, position: 9360, leader: dot}
"""

JSON_STYLE = {
    "align": "justify",
    "line-height": 1.5,
    "indent": 1,
    "keepNext": True,
    "tabs": [{"type": "right", "position": 9360, "leader": "dot"}],
}


class TestLoadStyleMap:
    """Tests for load_style_map."""

    def test_yaml_with_paragraph_key(self, tmp_path: Path) -> None:
        """Test that a nested paragraph mapping is returned."""
        path = tmp_path / "style.yaml"
        path.write_text(YAML_STYLE, encoding="utf-8")

        style_map = load_style_map(path)

        assert style_map["align"] == "justify"
        assert style_map["line-height"] == 1.5
        assert list(style_map) == ["align", "line-height", "indent", "keepNext", "tabs"]

    def test_json_top_level(self, tmp_path: Path) -> None:
        """Test a flat JSON mapping."""
        path = tmp_path / "style.json"
        path.write_text(json.dumps(JSON_STYLE), encoding="utf-8")

        assert load_style_map(path) == JSON_STYLE

    def test_explicit_format_overrides_suffix(self, tmp_path: Path) -> None:
        """Test reading JSON from a file with another suffix."""
        path = tmp_path / "style.txt"
        path.write_text(json.dumps({"align": "left"}), encoding="utf-8")

        assert load_style_map(path, format="json") == {"align": "left"}

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test that a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_style_map(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        """Test that a YAML syntax error becomes StyleMapError."""
        path = tmp_path / "bad.yaml"
        path.write_text("align: [unclosed\n", encoding="utf-8")

        with pytest.raises(StyleMapError, match="Failed to parse YAML"):
            load_style_map(path)

    def test_invalid_json(self, tmp_path: Path) -> None:
        """Test that a JSON syntax error becomes StyleMapError."""
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(StyleMapError, match="Failed to parse JSON"):
            load_style_map(path)

    @pytest.mark.parametrize("suffix", [".yaml", ".json"])
    def test_undecodable_bytes(self, tmp_path: Path, suffix: str) -> None:
        """Test that a file that is not UTF-8 becomes StyleMapError."""
        path = tmp_path / f"binary{suffix}"
        path.write_bytes(b"\xff\xfe\xfa")

        with pytest.raises(StyleMapError, match="Failed to read style map file") as exc_info:
            load_style_map(path)

        assert exc_info.value.path == str(path)

    def test_non_text_keys_kept_for_the_model(self, tmp_path: Path) -> None:
        """Test that integer keys load and are skipped when building a style."""
        path = tmp_path / "style.yaml"
        path.write_text("align: center\n1: x\n", encoding="utf-8")

        assert load_style_map(path) == {"align": "center", 1: "x"}
        assert load_paragraph_style(path).align == "center"

    def test_non_mapping_content(self, tmp_path: Path) -> None:
        """Test that a list document is rejected."""
        path = tmp_path / "list.yaml"
        path.write_text("- align\n- indent\n", encoding="utf-8")

        with pytest.raises(StyleMapError, match="dictionary"):
            load_style_map(path)

    def test_unsupported_format(self, tmp_path: Path) -> None:
        """Test that an unknown format name is rejected."""
        path = tmp_path / "style.yaml"
        path.write_text("align: left\n", encoding="utf-8")

        with pytest.raises(StyleMapError, match="Unsupported format") as exc_info:
            load_style_map(path, format="toml")

        assert exc_info.value.path == str(path)


class TestLoadParagraphStyle:
    """Tests for load_paragraph_style."""

    def test_yaml_and_json_agree(self, tmp_path: Path) -> None:
        """Test that both formats build the same style."""
        yaml_path = tmp_path / "style.yml"
        yaml_path.write_text(YAML_STYLE, encoding="utf-8")
        json_path = tmp_path / "style.json"
        json_path.write_text(json.dumps(JSON_STYLE), encoding="utf-8")

        from_yaml = load_paragraph_style(yaml_path)
        from_json = load_paragraph_style(json_path)

        assert from_yaml == from_json
        assert from_yaml.align == "both"
        assert from_yaml.spacing == 360
        assert from_yaml.indent == 720
        assert from_yaml.keep_next is True
        assert len(from_yaml.tabs) == 1

    def test_matches_from_style_map(self, tmp_path: Path) -> None:
        """Test equivalence with building from the dict directly."""
        path = tmp_path / "style.json"
        path.write_text(json.dumps(JSON_STYLE), encoding="utf-8")

        assert load_paragraph_style(path) == ParagraphStyle.from_style_map(JSON_STYLE)

    def test_invalid_line_height(self, tmp_path: Path) -> None:
        """Test that style validation errors propagate."""
        path = tmp_path / "style.yaml"
        path.write_text("line-height: 0\n", encoding="utf-8")

        with pytest.raises(InvalidStyleError):
            load_paragraph_style(path)
