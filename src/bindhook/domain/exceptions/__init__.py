"""Domain exceptions."""

from bindhook.domain.exceptions.base import BindHookError
from bindhook.domain.exceptions.cycle import (
    CycleClosedError,
    CycleError,
    CycleOverlapError,
    RestoreError,
)
from bindhook.domain.exceptions.decorator import (
    ArgumentError,
    ArityError,
    DecoratorError,
    DuplicateDecoratorError,
    TargetError,
)
from bindhook.domain.exceptions.parsing import ParseError

__all__ = [
    "ArgumentError",
    "ArityError",
    "BindHookError",
    "CycleClosedError",
    "CycleError",
    "CycleOverlapError",
    "DecoratorError",
    "DuplicateDecoratorError",
    "ParseError",
    "RestoreError",
    "TargetError",
]
