"""Parsing exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from bindhook.domain.exceptions.base import BindHookError

if TYPE_CHECKING:
    from pathlib import Path

    from bindhook.domain.model.location import Location


class ParseError(BindHookError):
    """Source text is not valid JavaScript under the decorator grammar.

    Attributes:
        path: File that failed to parse, None for in-memory source
        reason: Why parsing failed
        location: Position of the first error node, if known
    """

    def __init__(
        self,
        path: Path | None,
        reason: str,
        location: Location | None = None,
    ) -> None:
        # FAIL-FIRST: validate required parameters
        if not reason:
            raise ValueError("reason must be non-empty string")

        self.path = path
        self.reason = reason
        self.location = location

        where = f" at {location}" if location is not None else ""
        super().__init__(f"Failed to parse {path or '<source>'}: {reason}{where}")
