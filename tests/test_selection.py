"""Tests for the coordinate table, color info and saved colors."""

from colorgrid.core.color import Color
from colorgrid.core.constants import RESET
from colorgrid.explore.hits import ColorInfo, CoordinateColorTable
from colorgrid.explore.selection import SavedColors


class TestCoordinateColorTable:
    """Tests for CoordinateColorTable."""

    def test_lookup(self) -> None:
        table = CoordinateColorTable()
        assert table.lookup(1, 1) is None
        table.rebuild("a", lambda: {(1, 1): Color.WHITE})
        assert table.lookup(1, 1) == Color.WHITE
        assert table.lookup(1, 2) is None
        assert len(table) == 1

    def test_same_generation_skips_build(self) -> None:
        table = CoordinateColorTable()
        calls = []

        def build() -> dict:
            calls.append(1)
            return {(1, 1): Color.WHITE}

        assert table.rebuild("a", build)
        assert not table.rebuild("a", build)
        assert len(calls) == 1

    def test_new_generation_replaces_entries(self) -> None:
        table = CoordinateColorTable()
        table.rebuild("a", lambda: {(1, 1): Color.WHITE})
        table.rebuild("b", lambda: {(2, 2): Color.BLACK})
        assert table.lookup(1, 1) is None
        assert table.lookup(2, 2) == Color.BLACK
        assert table.generation == "b"

    def test_invalidate(self) -> None:
        table = CoordinateColorTable()
        table.rebuild("a", lambda: {(1, 1): Color.WHITE})
        table.invalidate()
        assert table.rebuild("a", lambda: {})
        assert len(table) == 0


class TestColorInfo:
    """Tests for ColorInfo."""

    def test_fields(self) -> None:
        info = ColorInfo.of(Color.from_rgb(255, 0, 0), 0)
        assert info.name == "RGB#ff0000"
        assert info.canonical == "#ff0000"
        assert info.hsl == "hsl(0 100% 50%)"
        assert info.extra.startswith(" (#ff0000) hsl(0 100% 50%) oklch(")

    def test_description(self) -> None:
        info = ColorInfo.of(Color.from_256(196), 0)
        text = info.description()
        assert text.startswith(f"\x1b[48;5;196m    {RESET} : 256:196 (#ff0000) ")

    def test_basic_name_not_repeated(self) -> None:
        info = ColorInfo.of(Color.BLACK, 0)
        assert info.extra.startswith(" hsl(0 0% 0%) oklch(")
        assert info.description().startswith(f"\x1b[40m    {RESET} : Black hsl(")


class TestSavedColors:
    """Tests for SavedColors."""

    def test_dedup(self) -> None:
        saved = SavedColors()
        assert saved.add("a")
        assert not saved.add("a")
        assert len(saved) == 1
        assert "a" in saved

    def test_insertion_order(self) -> None:
        saved = SavedColors()
        for item in ("c", "a", "b", "a"):
            saved.add(item)
        assert list(saved) == ["c", "a", "b"]

    def test_empty_is_falsy(self) -> None:
        saved = SavedColors()
        assert not saved
        saved.add("x")
        assert saved
