"""Lifecycle states tracked by the runner for every group and unit."""

from enum import Enum


class Scope(str, Enum):
    UNIT = "unit"
    GROUP = "group"


class GroupState(str, Enum):
    NOT_STARTED = "not_started"
    SETUP_RUN = "setup_run"
    RUNNING_UNIT = "running_unit"
    TORN_DOWN = "torn_down"


class UnitState(str, Enum):
    SETUP_PENDING = "setup_pending"
    SETUP_DONE = "setup_done"
    BODY_RUNNING = "body_running"
    TEARDOWN_DONE = "teardown_done"
    SKIPPED = "skipped"


class Status(str, Enum):
    """Final status of a unit."""

    PASSED = "passed"
    FAILED = "failed"
    ERROR = "error"
    SKIPPED = "skipped"
