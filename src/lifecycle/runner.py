"""Runner — executes declared groups and returns a structured result.

Units run one after another on the calling thread; nothing here may be
parallelised, because per-group state is shared by reference between units.
"""

from __future__ import annotations

import io
import time
from dataclasses import dataclass, field

from lifecycle.context import Context
from lifecycle.exception import (
    AssertionFailure,
    BodyError,
    DeclarationError,
    RecordedFailure,
    SetupFailure,
    Skipped,
    TeardownFailure,
)
from lifecycle.group import PATH_SEPARATOR, ActionKind, Group, Unit
from lifecycle.logger import LOGGER, LogStream
from lifecycle.state import GroupState, Scope, Status, UnitState


@dataclass
class UnitResult:
    name: str
    status: Status
    duration_ms: float = 0.0
    message: str = ""
    failures: list[RecordedFailure] = field(default_factory=list)
    skip_reason: str | None = None
    log: str = ""


@dataclass
class RunResult:
    passed: int = 0
    failed: int = 0
    errors: int = 0
    skipped: int = 0
    duration_ms: float = 0.0
    results: list[UnitResult] = field(default_factory=list)
    # Teardown failures of whole groups, which belong to no single unit
    group_failures: list[TeardownFailure] = field(default_factory=list)
    # (path, state) transitions in the order they happened
    trace: list[tuple[str, GroupState | UnitState]] = field(default_factory=list)

    @property
    def total(self) -> int:
        return self.passed + self.failed + self.errors + self.skipped

    @property
    def success(self) -> bool:
        return self.failed == 0 and self.errors == 0 and not self.group_failures

    @property
    def exit_code(self) -> int:
        return 0 if self.success else 1

    def add(self, unit_result: UnitResult) -> None:
        self.results.append(unit_result)
        if unit_result.status is Status.PASSED:
            self.passed += 1
        elif unit_result.status is Status.FAILED:
            self.failed += 1
        elif unit_result.status is Status.ERROR:
            self.errors += 1
        else:
            self.skipped += 1

    def get(self, name: str) -> UnitResult | None:
        """Returns the result for the unit whose path or description is name."""
        for unit_result in self.results:
            if unit_result.name == name or unit_result.name.endswith(f"{PATH_SEPARATOR}{name}"):
                return unit_result
        return None


class Runner:
    """Runs groups sequentially and collects a RunResult.

    Usage:
        runner = Runner()
        result = runner.run(suite)
        sys.exit(result.exit_code)
    """

    def run(self, *groups: Group) -> RunResult:
        """Runs top-level groups in order.

        A nested group cannot be run on its own: its enclosing groups own
        setup that its units depend on.
        """
        for group in groups:
            if group.parent is not None:
                raise DeclarationError(f"group {group.path!r} is nested; run its outermost group instead")
        result = RunResult()
        start = time.monotonic()
        for group in groups:
            self._run_group(group, None, result)
        result.duration_ms = (time.monotonic() - start) * 1000
        LOGGER.info(
            f"Ran {result.total} units in {result.duration_ms:.1f}ms: {result.passed} passed, "
            f"{result.failed} failed, {result.errors} errors, {result.skipped} skipped"
        )
        return result

    # Groups

    def _run_group(self, group: Group, parent_ctx: Context | None, result: RunResult) -> None:
        ctx = Context(group.path, parent_ctx)
        finalizers: dict = {}
        self._transition(result, group.path, GroupState.NOT_STARTED)
        group.running = True
        try:
            outcome = self._setup(group, Scope.GROUP, ctx, finalizers)
            if outcome is None:
                self._transition(result, group.path, GroupState.SETUP_RUN)
                for child in group.children:
                    if isinstance(child, Group):
                        self._run_group(child, ctx, result)
                    else:
                        self._transition(result, group.path, GroupState.RUNNING_UNIT)
                        result.add(self._run_unit(child, ctx, result))
            else:
                self._abandon_group(group, outcome, result)
            failures = self._teardown(group, Scope.GROUP, ctx, finalizers, run_hooks=outcome is None)
            result.group_failures.extend(failures)
            self._transition(result, group.path, GroupState.TORN_DOWN)
        finally:
            group.running = False

    def _abandon_group(self, group: Group, outcome: Exception, result: RunResult) -> None:
        """Reports every unit of a group whose setup did not complete."""
        for unit in group.units():
            if isinstance(outcome, Skipped):
                result.add(UnitResult(unit.path, Status.SKIPPED, message=outcome.reason, skip_reason=outcome.reason))
            else:
                result.add(UnitResult(unit.path, Status.ERROR, message=str(outcome), failures=[outcome]))

    # Units

    def _run_unit(self, unit: Unit, group_ctx: Context, result: RunResult) -> UnitResult:
        if unit.skip_reason is not None:
            self._transition(result, unit.path, UnitState.SKIPPED)
            LOGGER.info(f"Skipping {unit.path}: {unit.skip_reason}")
            return UnitResult(unit.path, Status.SKIPPED, message=unit.skip_reason, skip_reason=unit.skip_reason)

        ctx = Context(unit.path, group_ctx)
        lineage = unit.group.lineage()
        finalizers: dict = {}
        unit_result = UnitResult(unit.path, Status.PASSED)
        stream = io.StringIO()
        log_id = LogStream.Register(stream)
        start = time.monotonic()
        try:
            self._transition(result, unit.path, UnitState.SETUP_PENDING)
            outcome = None
            for group in lineage:
                outcome = self._setup(group, Scope.UNIT, ctx, finalizers)
                if outcome is not None:
                    break

            if outcome is None:
                self._transition(result, unit.path, UnitState.SETUP_DONE)
                self._transition(result, unit.path, UnitState.BODY_RUNNING)
                self._run_body(unit, ctx, unit_result)
            elif isinstance(outcome, Skipped):
                unit_result.status = Status.SKIPPED
                unit_result.skip_reason = outcome.reason
            else:
                unit_result.status = Status.ERROR
                unit_result.failures.append(outcome)

            for group in reversed(lineage):
                failures = self._teardown(group, Scope.UNIT, ctx, finalizers, run_hooks=outcome is None)
                unit_result.failures.extend(failures)
                if failures and unit_result.status in (Status.PASSED, Status.SKIPPED):
                    unit_result.status = Status.ERROR
            self._transition(result, unit.path, UnitState.TEARDOWN_DONE)
        finally:
            LogStream.Unregister(log_id)
            unit_result.duration_ms = (time.monotonic() - start) * 1000

        unit_result.log = stream.getvalue()
        if unit_result.failures:
            unit_result.message = str(unit_result.failures[0])
        elif unit_result.skip_reason is not None:
            unit_result.message = unit_result.skip_reason
        return unit_result

    def _run_body(self, unit: Unit, ctx: Context, unit_result: UnitResult) -> None:
        try:
            unit.body(ctx)
        except Skipped as exc:
            LOGGER.info(f"Skipped {unit.path}: {exc.reason}")
            unit_result.status = Status.SKIPPED
            unit_result.skip_reason = exc.reason
        except AssertionError as exc:
            LOGGER.warning(f"FAILED {unit.path}: {exc}")
            unit_result.status = Status.FAILED
            unit_result.failures.append(AssertionFailure(unit.description, exc))
        except Exception as exc:
            LOGGER.warning(f"ERROR {unit.path}: {type(exc).__name__}: {exc}")
            unit_result.status = Status.ERROR
            unit_result.failures.append(BodyError(unit.description, exc))

    # Setup / teardown

    def _setup(self, group: Group, scope: Scope, ctx: Context, finalizers: dict) -> Exception | None:
        """Runs group's setup actions of scope. Returns a Skipped or SetupFailure that stopped them."""
        for action in group.actions(scope):
            if action.kind is ActionKind.AFTER:
                continue
            LOGGER.debug(f"{scope.value} setup {action.name!r} of {group.path!r} for {ctx.name!r}")
            try:
                action.setup(ctx, finalizers)
            except Skipped as exc:
                return exc
            except Exception as exc:
                LOGGER.warning(f"Setup {action.name!r} of {group.path!r} failed: {type(exc).__name__}: {exc}")
                return SetupFailure(action.name, exc, scope=scope.value, group=group.path)
        return None

    def _teardown(
        self, group: Group, scope: Scope, ctx: Context, finalizers: dict, run_hooks: bool
    ) -> list[TeardownFailure]:
        """Runs every teardown action of scope in reverse order, collecting failures."""
        failures = []
        for action in reversed(group.actions(scope)):
            if action.kind is ActionKind.BEFORE:
                continue
            LOGGER.debug(f"{scope.value} teardown {action.name!r} of {group.path!r} for {ctx.name!r}")
            try:
                action.teardown(ctx, finalizers, run_hooks)
            except Exception as exc:
                LOGGER.warning(f"Teardown {action.name!r} of {group.path!r} failed: {type(exc).__name__}: {exc}")
                failures.append(TeardownFailure(action.name, exc, scope=scope.value, group=group.path))
        return failures

    @staticmethod
    def _transition(result: RunResult, path: str, state: GroupState | UnitState) -> None:
        LOGGER.debug(f"{path} -> {state.value}")
        result.trace.append((path, state))
