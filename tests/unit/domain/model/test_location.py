"""Tests for domain/model/location.py."""

from pathlib import Path

import pytest

from bindhook.domain.model.location import Location


class TestLocation:
    """Tests for Location value object."""

    def test_str_format(self) -> None:
        loc = Location(file=Path("lwc/counter/counter.js"), line=4, column=5)
        assert str(loc) == "lwc/counter/counter.js:4:5"

    def test_str_without_file(self) -> None:
        loc = Location(file=None, line=1, column=0)
        assert str(loc) == "<source>:1:0"

    def test_zero_line_raises(self) -> None:
        with pytest.raises(ValueError, match="line must be > 0"):
            Location(file=None, line=0, column=0)

    def test_negative_column_raises(self) -> None:
        with pytest.raises(ValueError, match="column must be >= 0"):
            Location(file=None, line=1, column=-1)

    def test_end_line_before_line_raises(self) -> None:
        with pytest.raises(ValueError, match="end_line"):
            Location(file=None, line=5, column=0, end_line=4)

    def test_is_frozen(self) -> None:
        loc = Location(file=None, line=1, column=0)
        pytest.raises(AttributeError, setattr, loc, "line", 2)
