"""Exceptions raised and recorded by the lifecycle harness.

Failures captured while running are recorded on results rather than raised out
of the runner. Each recorded failure chains the exception that caused it through
``__cause__`` and keeps its formatted traceback.
"""

from __future__ import annotations

import traceback


class LifecycleError(Exception):
    """Base class for every harness exception."""


class DeclarationError(LifecycleError):
    """A group, unit, hook or fixture was declared incorrectly."""


class Skipped(LifecycleError):
    """Raised from inside a unit body to mark the unit as skipped."""

    def __init__(self, reason: str = "") -> None:
        super().__init__(reason)
        self.reason = reason


class RecordedFailure(LifecycleError):
    """A captured failure attached to a unit or group result.

    Properties:
        phase: Where the failure happened, e.g. 'body', 'setup', 'teardown' (str)
        action: Name of the hook, fixture or body that raised (str)
        details: Formatted traceback of the original exception (str)
    """

    phase = "body"

    def __init__(self, action: str, original: BaseException) -> None:
        super().__init__(f"{action}: {type(original).__name__}: {original}")
        self.action = action
        self.__cause__ = original
        self.details = "".join(traceback.format_exception(type(original), original, original.__traceback__))

    @property
    def original(self) -> BaseException:
        return self.__cause__


class AssertionFailure(RecordedFailure):
    """An expectation inside a unit body did not hold."""


class BodyError(RecordedFailure):
    """A unit body raised something other than an assertion."""


class SetupFailure(RecordedFailure):
    """A setup action raised; the owning unit (or whole group) did not run.

    Properties:
        scope: 'unit' or 'group' (str)
        group: Path of the group that declared the action (str)
    """

    phase = "setup"

    def __init__(self, action: str, original: BaseException, scope: str, group: str) -> None:
        super().__init__(action, original)
        self.scope = scope
        self.group = group


class TeardownFailure(RecordedFailure):
    """A teardown action raised; reported in addition to the body result."""

    phase = "teardown"

    def __init__(self, action: str, original: BaseException, scope: str, group: str) -> None:
        super().__init__(action, original)
        self.scope = scope
        self.group = group
