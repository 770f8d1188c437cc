"""Narrow syntax model of a JavaScript module.

The rewrite only needs imports, classes, class members, decorators and
the call/identifier expressions inside decorators. The parser adapter
converts the concrete tree into these closed variants; nothing else of
the source tree is kept.

All spans are byte offsets into the UTF-8 encoded source.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from bindhook.domain.model.location import Location


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open byte range [start, end) into the encoded source."""

    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.start < 0:
            raise ValueError(f"start must be >= 0, got {self.start}")
        if self.end < self.start:
            raise ValueError(f"end ({self.end}) must be >= start ({self.start})")

    def __len__(self) -> int:
        return self.end - self.start

    def contains(self, other: Span) -> bool:
        """Check if other lies fully inside this span."""
        return self.start <= other.start and other.end <= self.end


# =============================================================================
# Expressions
# =============================================================================


@dataclass(frozen=True, slots=True)
class Identifier:
    """Bare identifier reference: `sig`."""

    name: str
    span: Span
    location: Location

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("identifier name must not be empty")


@dataclass(frozen=True, slots=True)
class CallExpression:
    """Call of a named function: `bind(a, b)`.

    Attributes:
        callee: Callee as written (`bind`, `x.bind`)
        arguments: Positional arguments in source order
    """

    callee: str
    arguments: tuple[Expression, ...]
    span: Span
    location: Location

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.callee:
            raise ValueError("callee must not be empty")


@dataclass(frozen=True, slots=True)
class OtherExpression:
    """Any expression the rewrite does not look into.

    Attributes:
        kind: Grammar node type (e.g. "member_expression", "string")
        text: Source text of the expression
    """

    kind: str
    text: str
    span: Span
    location: Location


Expression = Identifier | CallExpression | OtherExpression


# =============================================================================
# Classes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Decorator:
    """Decorator application: `@name`, `@name(args)`, `@ns.name(args)`."""

    expression: Expression
    span: Span
    location: Location

    @property
    def name(self) -> str | None:
        """Decorator name token, None for non-callable shapes."""
        match self.expression:
            case Identifier(name=name):
                return name
            case CallExpression(callee=callee):
                return callee
            case _:
                return None

    @property
    def arguments(self) -> tuple[Expression, ...]:
        """Call arguments. Bare `@name` has none."""
        if isinstance(self.expression, CallExpression):
            return self.expression.arguments
        return ()


@dataclass(frozen=True, slots=True)
class FieldDefinition:
    """Class field: `@dec static name = value;`.

    Attributes:
        name: Property name as written (may be `#x`, `"x"`, `[k]`)
        name_kind: Grammar node type of the name
        decorators: Decorators in source order
        is_static: Declared with `static`
        span: Whole member, decorators included, terminating `;` excluded
    """

    name: str
    name_kind: str
    decorators: tuple[Decorator, ...]
    is_static: bool
    span: Span
    location: Location

    @property
    def has_identifier_name(self) -> bool:
        """Plain identifier name (not private, string, number or computed)."""
        return self.name_kind == "property_identifier"


@dataclass(frozen=True, slots=True)
class MethodDefinition:
    """Class method, getter or setter."""

    name: str
    decorators: tuple[Decorator, ...]
    span: Span
    location: Location


ClassMember = FieldDefinition | MethodDefinition


@dataclass(frozen=True, slots=True)
class ClassDeclaration:
    """Class declaration or class expression.

    Members are the direct members of this class body only.
    Nested classes appear as their own ClassDeclaration.
    """

    name: str | None
    members: tuple[ClassMember, ...]
    span: Span
    location: Location

    @property
    def display_name(self) -> str:
        """Name for messages, "<anonymous>" for unnamed class expressions."""
        return self.name or "<anonymous>"


# =============================================================================
# Imports
# =============================================================================


@dataclass(frozen=True, slots=True)
class ImportSpecifier:
    """One `{ imported as local }` entry of a named import."""

    imported: str
    local: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.imported:
            raise ValueError("imported name must not be empty")
        if not self.local:
            raise ValueError("local name must not be empty")


@dataclass(frozen=True, slots=True)
class ImportDeclaration:
    """Top-level `import ... from "source";` statement.

    Attributes:
        source: Module path without quotes
        specifiers: Named import specifiers (default/namespace imports excluded)
    """

    source: str
    specifiers: tuple[ImportSpecifier, ...]
    span: Span
    location: Location

    def binds(self, module: str, local: str) -> bool:
        """Check if this statement binds `local` from `module`."""
        return self.source == module and any(s.local == local for s in self.specifiers)


# =============================================================================
# Module
# =============================================================================


@dataclass(frozen=True, slots=True)
class Program:
    """Parsed module reduced to what the rewrite needs.

    Attributes:
        imports: Top-level import statements in source order
        classes: Every class in the module in source order, nested included
        insertion_offset: Byte offset where a new first statement is inserted
    """

    imports: tuple[ImportDeclaration, ...]
    classes: tuple[ClassDeclaration, ...]
    insertion_offset: int = 0

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.insertion_offset < 0:
            raise ValueError(f"insertion_offset must be >= 0, got {self.insertion_offset}")


@dataclass(frozen=True, slots=True)
class SyntaxTree:
    """Parsed source owned by a single transform call.

    Attributes:
        path: Source file, None for in-memory text
        source: UTF-8 encoded source all spans point into
        program: Narrow syntax model
        newline: Line terminator used by the file ("\\n" or "\\r\\n")
    """

    path: Path | None
    source: bytes
    program: Program
    newline: str = "\n"

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.program is None:
            raise TypeError("program must not be None")
        if self.newline not in ("\n", "\r\n"):
            raise ValueError(f"unsupported newline {self.newline!r}")

    def text(self, span: Span) -> str:
        """Source text covered by span."""
        return self.source[span.start : span.end].decode("utf-8")
