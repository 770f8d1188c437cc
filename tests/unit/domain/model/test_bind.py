"""Tests for domain/model/bind.py."""

from bindhook.domain.model.bind import BIND_IMPORT, replacement_code


class TestBindConstants:
    """The rewritten text is a fixed contract with the c/signals runtime."""

    def test_import_statement(self) -> None:
        assert BIND_IMPORT == 'import { bind } from "c/signals";'

    def test_replacement_code(self) -> None:
        assert replacement_code("x", "sig") == 'x = bind(this, "x").to(sig)'
