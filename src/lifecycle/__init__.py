"""In-process fixture lifecycle harness.

Declare units inside a Group, attach per-unit (``before_each``/``after_each``,
``fixture(scope="unit")``) and per-group (``before_all``/``after_all``,
``fixture(scope="group")``) setup and teardown, then hand the group to a
Runner.
"""

from lifecycle.context import Context
from lifecycle.exception import (
    AssertionFailure,
    BodyError,
    DeclarationError,
    LifecycleError,
    RecordedFailure,
    SetupFailure,
    Skipped,
    TeardownFailure,
)
from lifecycle.group import Group, Unit
from lifecycle.runner import Runner, RunResult, UnitResult
from lifecycle.state import GroupState, Scope, Status, UnitState

__all__ = [
    "AssertionFailure",
    "BodyError",
    "Context",
    "DeclarationError",
    "Group",
    "GroupState",
    "LifecycleError",
    "RecordedFailure",
    "RunResult",
    "Runner",
    "Scope",
    "SetupFailure",
    "Skipped",
    "Status",
    "TeardownFailure",
    "Unit",
    "UnitResult",
    "UnitState",
]
