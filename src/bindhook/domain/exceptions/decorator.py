"""Decorator validation exceptions.

Raised by the detector when a @bind occurrence has the wrong shape.
Each one aborts the transform of the whole file.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from bindhook.domain.exceptions.base import BindHookError

if TYPE_CHECKING:
    from bindhook.domain.model.location import Location


class DecoratorError(BindHookError):
    """Malformed @bind occurrence.

    Attributes:
        class_name: Enclosing class ("<anonymous>" for unnamed class expressions)
        property_name: Decorated member name as written in source
        reason: What is wrong with the occurrence
        location: Position of the decorator
    """

    def __init__(
        self,
        class_name: str,
        property_name: str,
        reason: str,
        location: Location,
    ) -> None:
        # FAIL-FIRST validation
        if not class_name:
            raise ValueError("class_name must not be empty")
        if not property_name:
            raise ValueError("property_name must not be empty")
        if not reason:
            raise ValueError("reason must not be empty")
        if location is None:
            raise TypeError("location must not be None")

        self.class_name = class_name
        self.property_name = property_name
        self.reason = reason
        self.location = location
        super().__init__(f"{class_name}.{property_name}: {reason} at {location}")


class ArityError(DecoratorError):
    """@bind called with a number of arguments other than one.

    Attributes:
        count: Number of arguments found (0 for bare @bind)
    """

    def __init__(
        self,
        class_name: str,
        property_name: str,
        count: int,
        location: Location,
    ) -> None:
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")
        if count == 1:
            raise ValueError("count of 1 is a valid arity")

        self.count = count
        super().__init__(
            class_name,
            property_name,
            f"@bind expects exactly one argument, got {count}",
            location,
        )


class ArgumentError(DecoratorError):
    """@bind argument is not a plain identifier."""


class TargetError(DecoratorError):
    """@bind applied to something other than a non-static named class field."""


class DuplicateDecoratorError(DecoratorError):
    """More than one @bind on the same class field."""
