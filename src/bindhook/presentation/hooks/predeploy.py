"""Pre/post deploy hook: rewrite @bind bundles, deploy, restore.

pre_deploy rewrites every eligible bundle script in place and records
its original content in a fresh DeployCycle. post_deploy writes all
originals back. Exactly one cycle may be open at a time.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from bindhook.application.services.cycle import DeployCycle
from bindhook.application.services.transformer import BindTransformer
from bindhook.domain.exceptions.base import BindHookError
from bindhook.domain.exceptions.cycle import CycleOverlapError, RestoreError
from bindhook.domain.model.configuration import FailurePolicy, HookConfig
from bindhook.domain.model.cycle_report import CycleReport, SkippedComponent
from bindhook.domain.ports.lifecycle import POST_DEPLOY_EVENT, PRE_DEPLOY_EVENT
from bindhook.infrastructure.adapters.file_store import LocalFileStore

if TYPE_CHECKING:
    from pathlib import Path

    from bindhook.domain.ports.file_store import FileStorePort
    from bindhook.domain.ports.lifecycle import ComponentInventory, LifecyclePort

logger = logging.getLogger(__name__)


class BindDecoratorHook:
    """Drives BindTransformer and DeployCycle from lifecycle events.

    Contracts:
        - One open cycle: pre_deploy raises CycleOverlapError until
          post_deploy restored the previous cycle
        - Record before write: every file this hook touches gets restored;
          a file left untouched by a failed write is not recorded
        - ABORT policy never leaves a half-rewritten workspace behind
    """

    def __init__(
        self,
        config: HookConfig | None = None,
        transformer: BindTransformer | None = None,
        store: FileStorePort | None = None,
    ) -> None:
        """Initialize hook.

        Args:
            config: Hook configuration. Uses defaults if None.
            transformer: Source transformer. Uses BindTransformer() if None.
            store: File store. Uses LocalFileStore() if None.
        """
        self._config = config or HookConfig()
        self._transformer = transformer or BindTransformer()
        self._store: FileStorePort = store or LocalFileStore()
        self._cycle: DeployCycle | None = None
        self._skipped: list[SkippedComponent] = []
        self._last_report: CycleReport | None = None

    @property
    def cycle(self) -> DeployCycle | None:
        """Cycle of the latest pre_deploy, None before the first one."""
        return self._cycle

    @property
    def last_report(self) -> CycleReport | None:
        """Report of the latest post_deploy, None before the first one."""
        return self._last_report

    def register(self, lifecycle: LifecyclePort) -> None:
        """Subscribe to the pre- and post-deploy events."""
        lifecycle.on(PRE_DEPLOY_EVENT, self.pre_deploy)
        lifecycle.on(POST_DEPLOY_EVENT, self.post_deploy)

    def pre_deploy(self, event: ComponentInventory) -> DeployCycle:
        """Rewrite every eligible bundle script and open a new cycle.

        Args:
            event: Pre-deploy payload enumerating components

        Returns:
            The new cycle holding every rewritten file's original

        Raises:
            CycleOverlapError: Previous cycle not restored yet
            BindHookError, OSError: A component failed under ABORT policy;
                files already rewritten in this cycle are restored first
        """
        if self._cycle is not None and self._cycle.is_open:
            raise CycleOverlapError(len(self._cycle))

        cycle = DeployCycle()
        self._cycle = cycle
        self._skipped = []

        for component in event.source_components():
            if component.kind != self._config.bundle_kind:
                continue

            path = component.script_path(self._config.script_suffix)
            if path in cycle:
                logger.debug("Already rewrote %s in this cycle", path)
                continue

            try:
                self._rewrite(cycle, path)
            except (BindHookError, OSError) as exc:
                if self._config.failure_policy is FailurePolicy.SKIP:
                    logger.warning("Skipping %s: %s", path, exc)
                    self._skipped.append(SkippedComponent(path=path, reason=str(exc)))
                    continue
                logger.error("Aborting pre-deploy at %s: %s", path, exc)
                self._rollback(cycle, exc)
                raise

        logger.info("Pre-deploy rewrote %d file(s)", len(cycle))
        return cycle

    def post_deploy(self, result: object | None = None) -> CycleReport:
        """Restore every file rewritten by the open cycle.

        Args:
            result: Deploy result from the host, unused

        Returns:
            CycleReport of the closed cycle

        Raises:
            RestoreError: Some files could not be restored; all were attempted
        """
        del result  # Unused

        cycle = self._cycle
        if cycle is None or not cycle.is_open:
            logger.debug("No open deploy cycle to restore")
            self._last_report = CycleReport.empty()
            return self._last_report

        rewritten = cycle.paths
        skipped = tuple(self._skipped)
        try:
            restore = cycle.restore_all(self._store)
        except RestoreError as exc:
            self._last_report = CycleReport(
                rewritten=rewritten, skipped=skipped, restore=exc.report
            )
            raise

        self._last_report = CycleReport(rewritten=rewritten, skipped=skipped, restore=restore)
        logger.info("Post-deploy restored %d file(s)", len(restore.restored))
        return self._last_report

    def _rewrite(self, cycle: DeployCycle, path: Path) -> None:
        """Transform one script; write and record it if modified."""
        original = self._store.read_text(path)
        result = self._transformer.transform(original, path)
        if not result.modified:
            logger.debug("Nothing to rewrite in %s", path)
            return

        # A failed write may leave a truncated file, which restore must still cover
        cycle.record(path, original)
        try:
            self._store.write_text(path, result.text)
        except Exception:
            if self._is_untouched(path, original):
                cycle.discard(path)
            raise
        logger.info("Rewrote %d @bind field(s) in %s", len(result.occurrences), path)

    def _is_untouched(self, path: Path, original: str) -> bool:
        """Check if a file still holds its original content after a failed write."""
        try:
            return self._store.read_text(path) == original
        except (BindHookError, OSError) as exc:
            logger.debug("Cannot verify %s after failed write: %s", path, exc)
            return False

    def _rollback(self, cycle: DeployCycle, cause: BaseException) -> None:
        """Restore this cycle's rewrites after an aborting failure."""
        try:
            cycle.restore_all(self._store)
        except RestoreError as restore_error:
            logger.error("Rollback incomplete: %s", restore_error)
            cause.add_note(str(restore_error))
