"""
Tests for the tab stop models.

These tests verify how TabStop normalizes types, positions and leaders, and
how Tabs reads loosely structured entries.
"""

import logging

import pytest

from docx_parastyle.models.tabs import TabStop, Tabs


class TestTabStop:
    """Tests for the TabStop dataclass."""

    def test_defaults(self) -> None:
        """Test the default tab stop."""
        stop = TabStop()

        assert stop.stop_type is None
        assert stop.position == 0
        assert stop.leader is None

    @pytest.mark.parametrize(
        "stop_type", ["clear", "left", "right", "center", "decimal", "bar", "num"]
    )
    def test_valid_types_kept(self, stop_type: str) -> None:
        """Test that every w:tab type is accepted."""
        assert TabStop(stop_type, 720).stop_type == stop_type

    def test_unknown_type_dropped(self) -> None:
        """Test that an unknown type becomes None."""
        assert TabStop("diagonal", 720).stop_type is None

    @pytest.mark.parametrize("leader", ["none", "dot", "hyphen", "underscore", "heavy", "middleDot"])
    def test_valid_leaders_kept(self, leader: str) -> None:
        """Test that every w:tab leader is accepted."""
        assert TabStop("right", 720, leader).leader == leader

    def test_unknown_leader_dropped(self) -> None:
        """Test that an unknown leader becomes None."""
        assert TabStop("right", 720, "stars").leader is None

    def test_unhashable_type_and_leader_dropped(self) -> None:
        """Test that list or dict values for type and leader become None."""
        stop = TabStop(["left"], 720, {"dot": 1})  # type: ignore[arg-type]

        assert stop.stop_type is None
        assert stop.leader is None
        assert stop.position == 720

    def test_float_position_truncated(self) -> None:
        """Test that positions are whole twips."""
        assert TabStop("left", 720.9).position == 720

    def test_numeric_text_position(self) -> None:
        """Test that numeric text is read as a position."""
        assert TabStop("left", "1440").position == 1440

    @pytest.mark.parametrize("position", ["wide", None, True, float("inf"), float("nan"), "inf"])
    def test_non_numeric_position_is_zero(self, position: object) -> None:
        """Test that unusable positions become 0."""
        assert TabStop("left", position).position == 0  # type: ignore[arg-type]


class TestTabStopFromValue:
    """Tests for TabStop.from_value."""

    def test_tab_stop_passthrough(self) -> None:
        """Test that a TabStop is returned unchanged."""
        stop = TabStop("center", 4680)
        assert TabStop.from_value(stop) is stop

    def test_mapping_with_type_and_position(self) -> None:
        """Test the long mapping keys."""
        stop = TabStop.from_value({"type": "right", "position": 9360, "leader": "dot"})
        assert stop == TabStop("right", 9360, "dot")

    def test_mapping_with_val_and_pos(self) -> None:
        """Test the OOXML attribute names as mapping keys."""
        stop = TabStop.from_value({"val": "decimal", "pos": 2880})
        assert stop == TabStop("decimal", 2880)

    def test_sequence(self) -> None:
        """Test positional tuples and lists."""
        assert TabStop.from_value(("right", 9360, "dot")) == TabStop("right", 9360, "dot")
        assert TabStop.from_value(["left", 720]) == TabStop("left", 720)

    def test_bare_number(self) -> None:
        """Test that a number is a left tab at that position."""
        assert TabStop.from_value(1440) == TabStop("left", 1440)

    @pytest.mark.parametrize("raw", ["left", None, True, (), ("a", 1, "b", "c")])
    def test_unreadable_values(self, raw: object) -> None:
        """Test that other shapes are rejected."""
        assert TabStop.from_value(raw) is None


class TestTabs:
    """Tests for the Tabs collection."""

    def test_length_matches_entries(self) -> None:
        """Test that each readable entry becomes one stop."""
        tabs = Tabs([{"type": "left", "position": 720}, {"type": "right", "position": 9360}])
        assert len(tabs) == 2

    def test_order_preserved(self) -> None:
        """Test iteration order."""
        tabs = Tabs([2880, 720, 1440])
        assert [stop.position for stop in tabs] == [2880, 720, 1440]

    def test_indexing(self) -> None:
        """Test item access."""
        tabs = Tabs([("center", 4680)])
        assert tabs[0].stop_type == "center"

    def test_empty(self) -> None:
        """Test an empty collection."""
        assert len(Tabs()) == 0
        assert list(Tabs([])) == []

    def test_unreadable_entries_skipped(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test that bad entries are skipped with a warning."""
        with caplog.at_level(logging.WARNING):
            tabs = Tabs([720, "junk", {"type": "right", "position": 9360}])

        assert len(tabs) == 2
        assert "index 1" in caplog.text

    def test_mapping_with_list_type(self) -> None:
        """Test that a nested list as the type keeps the stop without a type."""
        tabs = Tabs([{"type": ["left"], "position": 720}, 1440])

        assert len(tabs) == 2
        assert tabs[0].stop_type is None
        assert tabs[0].position == 720
        assert tabs[1] == TabStop("left", 1440)

    def test_stops_is_a_copy(self) -> None:
        """Test that the stops list cannot modify the collection."""
        tabs = Tabs([720])
        tabs.stops.append(TabStop("left", 1440))
        assert len(tabs) == 1

    def test_equality(self) -> None:
        """Test that collections with the same stops are equal."""
        assert Tabs([720]) == Tabs([{"type": "left", "position": 720}])
        assert Tabs([720]) != Tabs([1440])
