"""Domain ports: interfaces implemented by infrastructure and host."""

from bindhook.domain.ports.file_store import FileStorePort
from bindhook.domain.ports.lifecycle import (
    POST_DEPLOY_EVENT,
    PRE_DEPLOY_EVENT,
    ComponentInventory,
    LifecyclePort,
)
from bindhook.domain.ports.reporter import ReporterProtocol
from bindhook.domain.ports.source_parser import SourceParserPort

__all__ = [
    "POST_DEPLOY_EVENT",
    "PRE_DEPLOY_EVENT",
    "ComponentInventory",
    "FileStorePort",
    "LifecyclePort",
    "ReporterProtocol",
    "SourceParserPort",
]
