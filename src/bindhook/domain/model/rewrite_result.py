"""Transform outcome for one file."""

from dataclasses import dataclass

from bindhook.domain.model.decorator import DecoratorOccurrence


@dataclass(frozen=True, slots=True)
class RewriteResult:
    """Result of transforming one source text.

    No partial state: either every occurrence was rewritten or the
    transform raised.

    Attributes:
        text: Rewritten source, or the original text when not modified
        modified: True iff at least one occurrence was rewritten
        occurrences: Rewritten occurrences in source order
        import_inserted: The bind import was added to the file
    """

    text: str
    modified: bool
    occurrences: tuple[DecoratorOccurrence, ...] = ()
    import_inserted: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.modified, bool):
            raise TypeError("modified must be bool")
        if self.modified != bool(self.occurrences):
            raise ValueError("modified must be True exactly when occurrences were rewritten")
        if self.import_inserted and not self.modified:
            raise ValueError("import cannot be inserted into an unmodified file")

    @classmethod
    def unchanged(cls, text: str) -> "RewriteResult":
        """No-op result carrying the original text."""
        return cls(text=text, modified=False)
