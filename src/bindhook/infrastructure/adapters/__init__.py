"""Adapters implementing domain ports."""

from bindhook.infrastructure.adapters.file_store import LocalFileStore
from bindhook.infrastructure.adapters.ts_parser import TreeSitterSourceParser

__all__ = [
    "LocalFileStore",
    "TreeSitterSourceParser",
]
