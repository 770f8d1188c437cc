"""Application services.

BindTransformer is the entry point for rewriting one source text.
DeployCycle tracks rewritten files between pre- and post-deploy.
"""

from bindhook.application.services.cycle import CycleState, DeployCycle
from bindhook.application.services.detector import DecoratorDetector, Detection
from bindhook.application.services.rewriter import RewriteEngine, TextEdit, apply_edits
from bindhook.application.services.transformer import BindTransformer

__all__ = [
    "BindTransformer",
    "CycleState",
    "DecoratorDetector",
    "DeployCycle",
    "Detection",
    "RewriteEngine",
    "TextEdit",
    "apply_edits",
]
