"""Hook configuration."""

from dataclasses import dataclass
from enum import Enum

from bindhook.domain.model.bind import LWC_BUNDLE_KIND


class FailurePolicy(Enum):
    """What pre-deploy does when one component fails to transform."""

    ABORT = "abort"  # restore this cycle's rewrites, re-raise
    SKIP = "skip"  # log, leave the component untouched, continue


@dataclass(frozen=True, slots=True)
class HookConfig:
    """Configuration for BindDecoratorHook.

    All fields have defaults. Immutable (frozen dataclass).

    Attributes:
        bundle_kind: Component kind eligible for rewriting
        failure_policy: Behaviour when a component fails to transform
        script_suffix: Extension of the bundle's primary script
    """

    bundle_kind: str = LWC_BUNDLE_KIND
    failure_policy: FailurePolicy = FailurePolicy.ABORT
    script_suffix: str = ".js"

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.bundle_kind:
            raise ValueError("bundle_kind must not be empty")
        if not isinstance(self.failure_policy, FailurePolicy):
            raise TypeError("failure_policy must be FailurePolicy")
        if not self.script_suffix.startswith("."):
            raise ValueError(f"script_suffix must start with '.', got {self.script_suffix!r}")
