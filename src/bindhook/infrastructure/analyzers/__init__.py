"""tree-sitter analyzers: concrete tree to narrow syntax model."""

from bindhook.infrastructure.analyzers.class_analyzer import ClassAnalyzer
from bindhook.infrastructure.analyzers.decorator_analyzer import DecoratorAnalyzer
from bindhook.infrastructure.analyzers.import_analyzer import ImportAnalyzer

__all__ = [
    "ClassAnalyzer",
    "DecoratorAnalyzer",
    "ImportAnalyzer",
]
