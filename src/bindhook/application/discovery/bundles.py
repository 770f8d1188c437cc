"""LWC bundle discovery from directory structure."""

from __future__ import annotations

from pathlib import Path

from bindhook.domain.model.bind import LWC_BUNDLE_KIND
from bindhook.domain.model.component import SourceComponent

_SKIPPED_DIRS = frozenset({"node_modules", "__tests__", ".sfdx", ".sf"})


def discover_bundles(root: Path, suffix: str = ".js") -> tuple[SourceComponent, ...]:
    """Discover LWC bundles under root.

    A bundle is a folder holding a script named after the folder:
    `<root>/**/<name>/<name>.js`.

    Args:
        root: Directory to scan (e.g. force-app/main/default/lwc)
        suffix: Primary script extension

    Returns:
        Bundle descriptors sorted by path

    Raises:
        ValueError: If root is not a directory

    Example:
        >>> discover_bundles(Path("force-app/main/default/lwc"))
        (SourceComponent(kind='LightningComponentBundle', ...), ...)
    """
    if not root.is_dir():
        raise ValueError(f"root must be a directory: {root}")

    bundles: list[SourceComponent] = []
    for script in sorted(root.rglob(f"*{suffix}")):
        if _SKIPPED_DIRS.intersection(script.relative_to(root).parts):
            continue
        if script.stem != script.parent.name:
            continue
        bundles.append(
            SourceComponent(
                kind=LWC_BUNDLE_KIND,
                content_directory=script.parent,
                name=script.stem,
            )
        )

    return tuple(bundles)
