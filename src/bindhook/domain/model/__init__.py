"""Domain model entities."""

from bindhook.domain.model.component import PreDeployEvent, SourceComponent
from bindhook.domain.model.configuration import FailurePolicy, HookConfig
from bindhook.domain.model.cycle_report import CycleReport, SkippedComponent
from bindhook.domain.model.decorator import DecoratorOccurrence
from bindhook.domain.model.location import Location
from bindhook.domain.model.restore import RestoreFailure, RestoreReport
from bindhook.domain.model.rewrite_result import RewriteResult
from bindhook.domain.model.snapshot import SnapshotRecord
from bindhook.domain.model.source_file import SourceFile
from bindhook.domain.model.syntax import (
    CallExpression,
    ClassDeclaration,
    Decorator,
    FieldDefinition,
    Identifier,
    ImportDeclaration,
    ImportSpecifier,
    MethodDefinition,
    OtherExpression,
    Program,
    Span,
    SyntaxTree,
)

__all__ = [
    "CallExpression",
    "ClassDeclaration",
    "CycleReport",
    "Decorator",
    "DecoratorOccurrence",
    "FailurePolicy",
    "FieldDefinition",
    "HookConfig",
    "Identifier",
    "ImportDeclaration",
    "ImportSpecifier",
    "Location",
    "MethodDefinition",
    "OtherExpression",
    "PreDeployEvent",
    "Program",
    "RestoreFailure",
    "RestoreReport",
    "RewriteResult",
    "SkippedComponent",
    "SnapshotRecord",
    "SourceComponent",
    "SourceFile",
    "Span",
    "SyntaxTree",
]
