"""Lifecycle ports: event dispatcher and component inventory.

Both are provided by the host deployment tool.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from bindhook.domain.model.component import SourceComponent

PRE_DEPLOY_EVENT = "scopedPreDeploy"
POST_DEPLOY_EVENT = "scopedPostDeploy"


class ComponentInventory(Protocol):
    """Pre-deploy payload: enumerates the artifacts about to ship."""

    def source_components(self) -> Iterable[SourceComponent]:
        """All component descriptors of this deployment."""
        ...


class LifecyclePort(Protocol):
    """Event dispatcher the hook subscribes to.

    Handlers are run to completion before the pipeline moves on.
    """

    def on(self, event: str, handler: Callable[..., Any]) -> None:
        """Subscribe handler to event."""
        ...
