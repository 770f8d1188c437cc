"""Discovery of deployable bundles on disk."""

from bindhook.application.discovery.bundles import discover_bundles

__all__ = ["discover_bundles"]
