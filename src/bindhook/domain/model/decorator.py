"""Validated @bind occurrence."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from bindhook.domain.model.bind import replacement_code

if TYPE_CHECKING:
    from bindhook.domain.model.location import Location
    from bindhook.domain.model.syntax import Span


@dataclass(frozen=True, slots=True)
class DecoratorOccurrence:
    """One @bind(arg) found on a class field, ready for rewriting.

    Attributes:
        class_name: Enclosing class display name
        property_name: Decorated field name
        decorator_name: Decorator name token (always the target name)
        arguments: Argument identifiers in source order (exactly one)
        member_span: Whole field to replace, decorators included
        kept_decorators: Source text of the other decorators on the field
        location: Position of the @bind decorator
    """

    class_name: str
    property_name: str
    decorator_name: str
    arguments: tuple[str, ...]
    member_span: Span
    location: Location
    kept_decorators: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.class_name:
            raise ValueError("class_name must not be empty")
        if not self.property_name:
            raise ValueError("property_name must not be empty")
        if not self.decorator_name:
            raise ValueError("decorator_name must not be empty")
        if len(self.arguments) != 1:
            raise ValueError(f"occurrence needs exactly one argument, got {len(self.arguments)}")
        if self.member_span is None:
            raise TypeError("member_span must not be None")
        if self.location is None:
            raise TypeError("location must not be None")

    @property
    def argument(self) -> str:
        """The single forwarded identifier."""
        return self.arguments[0]

    @property
    def replacement(self) -> str:
        """Source text that replaces member_span."""
        initializer = replacement_code(self.property_name, self.argument)
        return " ".join((*self.kept_decorators, initializer))
