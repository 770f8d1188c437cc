"""Integration tests: full pre-deploy/post-deploy cycles on real files.

Tests:
- Round trip over many bundles restores every byte
- Partial restore failure leaves other files restored
- Overlapping cycles rejected without touching disk
- ABORT leaves the workspace unchanged, SKIP deploys the rest
"""

from __future__ import annotations

from pathlib import Path

import pytest

from bindhook.application.discovery.bundles import discover_bundles
from bindhook.application.reporters.plain_text import PlainTextReporter
from bindhook.domain.exceptions.cycle import CycleOverlapError, RestoreError
from bindhook.domain.exceptions.parsing import ParseError
from bindhook.domain.model.component import PreDeployEvent
from bindhook.domain.model.configuration import FailurePolicy, HookConfig
from bindhook.domain.ports.lifecycle import POST_DEPLOY_EVENT, PRE_DEPLOY_EVENT
from bindhook.presentation.hooks.predeploy import BindDecoratorHook
from bindhook.presentation.lifecycle import Lifecycle
from tests.factories import (
    COUNTER_SOURCE,
    PLAIN_SOURCE,
    FailingStore,
    make_event,
    write_bundle,
)

STORE_SOURCE = (
    "// Shared store\r\n"
    'import { LightningElement } from "lwc";\r\n'
    'import { bind } from "c/signals";\r\n'
    'import { items, total } from "c/store";\r\n'
    "\r\n"
    "export default class Cart extends LightningElement {\r\n"
    "    @bind(items) lines;\r\n"
    "    @api @bind(total) sum = 0;\r\n"
    "}\r\n"
)


def snapshot(root: Path) -> dict[Path, bytes]:
    """All file contents under root."""
    return {path: path.read_bytes() for path in sorted(root.rglob("*")) if path.is_file()}


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """LWC folder with bundles that need, and do not need, rewriting."""
    lwc = tmp_path / "force-app" / "main" / "default" / "lwc"
    for i in range(5):
        write_bundle(lwc, f"counter{i}", COUNTER_SOURCE.replace("Counter", f"Counter{i}"))
    write_bundle(lwc, "cart", STORE_SOURCE)
    write_bundle(lwc, "plain", PLAIN_SOURCE)
    return lwc


class TestRoundTrip:
    """pre_deploy then post_deploy restores the workspace byte for byte."""

    def test_lifecycle_round_trip(self, workspace: Path) -> None:
        before = snapshot(workspace)
        lifecycle = Lifecycle()
        hook = BindDecoratorHook()
        hook.register(lifecycle)

        (cycle,) = lifecycle.emit(PRE_DEPLOY_EVENT, PreDeployEvent.of(discover_bundles(workspace)))

        assert len(cycle) == 6
        changed = {path for path, data in snapshot(workspace).items() if before[path] != data}
        assert changed == set(cycle.paths)

        cart = (workspace / "cart" / "cart.js").read_bytes().decode()
        assert cart.count('from "c/signals"') == 1
        assert '    lines = bind(this, "lines").to(items);\r\n' in cart
        assert '    @api sum = bind(this, "sum").to(total);\r\n' in cart

        (report,) = lifecycle.emit(POST_DEPLOY_EVENT, None)

        assert snapshot(workspace) == before
        assert report.passed
        assert len(report.restore.restored) == 6
        assert len(cycle) == 0
        assert "Status: PASS" in PlainTextReporter().report(report)

    def test_consecutive_cycles(self, workspace: Path) -> None:
        before = snapshot(workspace)
        hook = BindDecoratorHook()
        event = PreDeployEvent.of(discover_bundles(workspace))

        for _ in range(3):
            hook.pre_deploy(event)
            hook.post_deploy()
            assert snapshot(workspace) == before


class TestPartialRestore:
    """A failed restore write does not stop the others."""

    def test_one_failure(self, workspace: Path) -> None:
        before = snapshot(workspace)
        store = FailingStore()
        hook = BindDecoratorHook(store=store)
        cycle = hook.pre_deploy(PreDeployEvent.of(discover_bundles(workspace)))
        stuck = cycle.paths[2]
        store.failing.add(stuck)

        with pytest.raises(RestoreError) as exc_info:
            hook.post_deploy()

        report = exc_info.value.report
        assert [f.path for f in report.failures] == [stuck]
        assert len(report.restored) == 5
        after = snapshot(workspace)
        assert {path for path in before if before[path] != after[path]} == {stuck}
        assert str(stuck) in str(exc_info.value)

        # Cycle closed: next pre_deploy is allowed
        store.failing.clear()
        stuck.write_bytes(report.failures[0].original.encode())
        hook.pre_deploy(make_event())


class TestOverlap:
    """A second pre_deploy before post_deploy is rejected."""

    def test_overlap_rejected(self, workspace: Path) -> None:
        before = snapshot(workspace)
        hook = BindDecoratorHook()
        event = PreDeployEvent.of(discover_bundles(workspace))
        hook.pre_deploy(event)
        rewritten = snapshot(workspace)

        with pytest.raises(CycleOverlapError):
            hook.pre_deploy(event)

        assert snapshot(workspace) == rewritten
        hook.post_deploy()
        assert snapshot(workspace) == before


class TestFailurePolicies:
    """A malformed bundle under each policy."""

    @pytest.fixture
    def broken(self, workspace: Path) -> Path:
        write_bundle(workspace, "zzbroken", "class Broken {\n    @bind(\n}\n")
        return workspace / "zzbroken" / "zzbroken.js"

    def test_abort_leaves_disk_unchanged(self, workspace: Path, broken: Path) -> None:
        before = snapshot(workspace)
        hook = BindDecoratorHook(HookConfig(failure_policy=FailurePolicy.ABORT))

        with pytest.raises(ParseError):
            hook.pre_deploy(PreDeployEvent.of(discover_bundles(workspace)))

        assert snapshot(workspace) == before
        assert hook.post_deploy().rewritten == ()

    def test_skip_deploys_rest(self, workspace: Path, broken: Path) -> None:
        before = snapshot(workspace)
        hook = BindDecoratorHook(HookConfig(failure_policy=FailurePolicy.SKIP))

        cycle = hook.pre_deploy(PreDeployEvent.of(discover_bundles(workspace)))

        assert len(cycle) == 6
        assert broken not in cycle
        report = hook.post_deploy()
        assert [s.path for s in report.skipped] == [broken]
        assert snapshot(workspace) == before
