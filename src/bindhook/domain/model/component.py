"""Deployable component descriptors."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


@dataclass(frozen=True, slots=True)
class SourceComponent:
    """Artifact descriptor provided by the component inventory.

    Attributes:
        kind: Metadata type name (e.g. "LightningComponentBundle")
        content_directory: Bundle folder on disk
        name: Bundle name, also the primary script's base name
    """

    kind: str
    content_directory: Path
    name: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.kind:
            raise ValueError("kind must not be empty")
        if self.content_directory is None:
            raise TypeError("content_directory must not be None")
        if not self.name:
            raise ValueError("name must not be empty")

    def script_path(self, suffix: str = ".js") -> Path:
        """Primary script: <content_directory>/<name><suffix>."""
        return Path(self.content_directory) / f"{self.name}{suffix}"


@dataclass(frozen=True, slots=True)
class PreDeployEvent:
    """Payload of the pre-deploy lifecycle event."""

    components: tuple[SourceComponent, ...] = ()

    @classmethod
    def of(cls, components: Iterable[SourceComponent]) -> PreDeployEvent:
        """Build from any iterable of descriptors."""
        return cls(components=tuple(components))

    def source_components(self) -> tuple[SourceComponent, ...]:
        """All component descriptors in inventory order."""
        return self.components
