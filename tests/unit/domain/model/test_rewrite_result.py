"""Tests for domain/model/rewrite_result.py."""

import pytest

from bindhook.domain.model.rewrite_result import RewriteResult
from tests.factories import make_occurrence


class TestRewriteResult:
    """Tests for RewriteResult invariants."""

    def test_unchanged(self) -> None:
        result = RewriteResult.unchanged("text")
        assert result.text == "text"
        assert result.modified is False
        assert result.occurrences == ()
        assert result.import_inserted is False

    def test_modified_requires_occurrences(self) -> None:
        with pytest.raises(ValueError, match="modified"):
            RewriteResult(text="x", modified=True)

    def test_occurrences_require_modified(self) -> None:
        with pytest.raises(ValueError, match="modified"):
            RewriteResult(text="x", modified=False, occurrences=(make_occurrence(),))

    def test_import_requires_modified(self) -> None:
        with pytest.raises(ValueError, match="import"):
            RewriteResult(text="x", modified=False, import_inserted=True)

    def test_modified_must_be_bool(self) -> None:
        with pytest.raises(TypeError, match="bool"):
            RewriteResult(text="x", modified=1)  # type: ignore[arg-type]
