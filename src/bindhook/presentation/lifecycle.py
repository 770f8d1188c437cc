"""In-process lifecycle event dispatcher.

Stands in for the host deployment tool's lifecycle bus: handlers are
run synchronously, in subscription order, to completion. A handler's
exception propagates to the emitter and stops later handlers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable


class Lifecycle:
    """Named-event dispatcher implementing LifecyclePort."""

    __slots__ = ("_handlers",)

    def __init__(self) -> None:
        self._handlers: dict[str, list[Callable[..., Any]]] = {}

    def on(self, event: str, handler: Callable[..., Any]) -> None:
        """Subscribe handler to event.

        Raises:
            ValueError: If event is empty
            TypeError: If handler is not callable
        """
        # FAIL-FIRST: validate immediately
        if not event:
            raise ValueError("event must not be empty")
        if not callable(handler):
            raise TypeError(f"handler must be callable, got {type(handler).__name__}")

        self._handlers.setdefault(event, []).append(handler)

    def emit(self, event: str, *args: Any) -> list[Any]:
        """Run every handler of event with args.

        Returns:
            Handler return values in subscription order
        """
        return [handler(*args) for handler in tuple(self._handlers.get(event, ()))]

    def handler_count(self, event: str) -> int:
        """Number of handlers subscribed to event."""
        return len(self._handlers.get(event, ()))
