"""Tests for domain/exceptions/decorator.py."""

import pytest

from bindhook.domain.exceptions.decorator import (
    ArgumentError,
    ArityError,
    DecoratorError,
    DuplicateDecoratorError,
    TargetError,
)
from tests.factories import make_location


class TestDecoratorError:
    """Tests for DecoratorError."""

    def test_message_names_class_and_property(self) -> None:
        err = DecoratorError("Counter", "value", "bad", make_location(line=4, column=4))
        assert str(err) == "Counter.value: bad at /test/counter.js:4:4"
        assert err.class_name == "Counter"
        assert err.property_name == "value"

    def test_missing_location_raises(self) -> None:
        with pytest.raises(TypeError, match="location"):
            DecoratorError("Counter", "value", "bad", None)  # type: ignore[arg-type]

    @pytest.mark.parametrize(
        "subclass", [ArityError, ArgumentError, TargetError, DuplicateDecoratorError]
    )
    def test_subclasses(self, subclass: type[DecoratorError]) -> None:
        assert issubclass(subclass, DecoratorError)


class TestArityError:
    """Tests for ArityError."""

    def test_count_in_message(self) -> None:
        err = ArityError("Counter", "value", 2, make_location())
        assert err.count == 2
        assert "exactly one argument, got 2" in str(err)

    def test_count_of_one_raises(self) -> None:
        with pytest.raises(ValueError, match="valid arity"):
            ArityError("Counter", "value", 1, make_location())

    def test_negative_count_raises(self) -> None:
        with pytest.raises(ValueError, match="count"):
            ArityError("Counter", "value", -1, make_location())
