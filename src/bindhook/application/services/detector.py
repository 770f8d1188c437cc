"""Decorator detector: finds and validates @bind occurrences.

Read-only pass over the syntax model. Nothing is rewritten here; the
rewrite engine applies the collected occurrences afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from bindhook.domain.exceptions.decorator import (
    ArgumentError,
    ArityError,
    DuplicateDecoratorError,
    TargetError,
)
from bindhook.domain.model.bind import BIND_BINDING, SIGNALS_MODULE, TARGET_DECORATOR
from bindhook.domain.model.decorator import DecoratorOccurrence
from bindhook.domain.model.syntax import FieldDefinition, Identifier, MethodDefinition

if TYPE_CHECKING:
    from bindhook.domain.model.syntax import (
        ClassDeclaration,
        ClassMember,
        Decorator,
        SyntaxTree,
    )


@dataclass(frozen=True, slots=True)
class Detection:
    """Everything the rewrite engine needs from one file.

    Attributes:
        occurrences: Validated occurrences, sorted by position
        has_bind_import: File already imports bind from c/signals
    """

    occurrences: tuple[DecoratorOccurrence, ...]
    has_bind_import: bool


class DecoratorDetector:
    """Collects validated @bind occurrences from every class.

    Stateless - no state between detect() calls.
    FAIL-FIRST: the first malformed occurrence aborts the whole file.
    """

    def detect(self, tree: SyntaxTree) -> Detection:
        """Find all @bind occurrences and the existing bind import.

        Args:
            tree: Parsed source

        Returns:
            Detection with occurrences in source order

        Raises:
            ArityError: @bind without exactly one argument
            ArgumentError: @bind argument is not an identifier
            TargetError: @bind on a method, static field or non-identifier name
            DuplicateDecoratorError: @bind applied twice to one field
        """
        occurrences: list[DecoratorOccurrence] = []
        for cls in tree.program.classes:
            for member in cls.members:
                occurrence = self._detect_member(tree, cls, member)
                if occurrence is not None:
                    occurrences.append(occurrence)

        has_bind_import = any(
            imp.binds(SIGNALS_MODULE, BIND_BINDING) for imp in tree.program.imports
        )

        return Detection(
            occurrences=_outermost(occurrences),
            has_bind_import=has_bind_import,
        )

    def _detect_member(
        self,
        tree: SyntaxTree,
        cls: ClassDeclaration,
        member: ClassMember,
    ) -> DecoratorOccurrence | None:
        """Validate the @bind decorator of one member, if any."""
        matches = [d for d in member.decorators if d.name == TARGET_DECORATOR]
        if not matches:
            return None

        decorator = matches[0]
        class_name = cls.display_name

        if len(matches) > 1:
            raise DuplicateDecoratorError(
                class_name,
                member.name,
                "@bind applied more than once",
                matches[1].location,
            )

        arguments = decorator.arguments
        if len(arguments) != 1:
            raise ArityError(class_name, member.name, len(arguments), decorator.location)

        argument = arguments[0]
        if not isinstance(argument, Identifier):
            raise ArgumentError(
                class_name,
                member.name,
                f"@bind argument must be an identifier, got {_describe(argument)}",
                decorator.location,
            )

        field = self._require_field(class_name, member, decorator)

        return DecoratorOccurrence(
            class_name=class_name,
            property_name=field.name,
            decorator_name=TARGET_DECORATOR,
            arguments=(argument.name,),
            member_span=field.span,
            location=decorator.location,
            kept_decorators=tuple(
                tree.text(d.span) for d in field.decorators if d is not decorator
            ),
        )

    def _require_field(
        self,
        class_name: str,
        member: ClassMember,
        decorator: Decorator,
    ) -> FieldDefinition:
        """FAIL-FIRST: @bind target must be a plain instance field."""
        match member:
            case MethodDefinition():
                reason = "@bind applies to class fields, not methods"
            case FieldDefinition(is_static=True):
                reason = "@bind cannot decorate a static field"
            case FieldDefinition() if not member.has_identifier_name:
                reason = f"@bind needs an identifier field name, got {member.name_kind}"
            case FieldDefinition():
                return member
            case _:
                raise TypeError(f"unexpected class member {type(member).__name__}")
        raise TargetError(class_name, member.name, reason, decorator.location)


def _describe(expression: object) -> str:
    """Short kind name for error messages."""
    kind = getattr(expression, "kind", None)
    return kind if kind is not None else type(expression).__name__


def _outermost(occurrences: list[DecoratorOccurrence]) -> tuple[DecoratorOccurrence, ...]:
    """Sort by position and drop occurrences nested inside another one.

    A class expression in a rewritten field's initializer is discarded
    with the initializer, so its occurrences are never applied.
    """
    result: list[DecoratorOccurrence] = []
    for occurrence in sorted(occurrences, key=lambda o: o.member_span.start):
        if result and result[-1].member_span.contains(occurrence.member_span):
            continue
        result.append(occurrence)
    return tuple(result)
