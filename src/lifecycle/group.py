"""Declaration surface: groups, units, hooks and fixtures.

Example::

    suite = Group("RecipeBox")

    @suite.before_each
    def build_box(ctx):
        ctx.box = RecipeBox()

    @suite.unit("starts empty")
    def _(ctx):
        assert ctx.box.size() == 0

    with suite.group("with a shared box") as shared:

        @shared.fixture(scope="group")
        def shared_box(ctx):
            box = RecipeBox()
            yield box
            box.clear()

Hooks and fixture constructors take the context they set up as their only
argument. A fixture constructor's return value (or the single value it yields)
is stored on the context under the fixture's name; code after the ``yield``
runs as that fixture's teardown.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Any

from lifecycle.context import is_reserved
from lifecycle.exception import DeclarationError
from lifecycle.state import Scope

PATH_SEPARATOR = " > "


class ActionKind(str, Enum):
    BEFORE = "before"
    AFTER = "after"
    FIXTURE = "fixture"


@dataclass(eq=False)
class Action:
    """One declared setup or teardown step of a group."""

    name: str
    func: Callable[..., Any]
    scope: Scope
    kind: ActionKind

    def setup(self, ctx, finalizers: dict) -> None:
        """Runs the setup half of the action against ctx.

        A fixture records itself in finalizers once constructed, mapped to its
        generator when it has teardown code left to run.
        """
        if self.kind is ActionKind.BEFORE:
            self.func(ctx)
        elif self.kind is ActionKind.FIXTURE:
            value = self.func(ctx)
            gen = None
            if inspect.isgenerator(value):
                gen = value
                try:
                    value = next(gen)
                except StopIteration:
                    raise DeclarationError(f"fixture {self.name!r} did not yield a value") from None
            finalizers[self] = gen
            setattr(ctx, self.name, value)

    def teardown(self, ctx, finalizers: dict, run_hooks: bool) -> None:
        """Runs the teardown half: an after hook, or the rest of a fixture generator."""
        if self.kind is ActionKind.AFTER:
            if run_hooks:
                self.func(ctx)
        elif self.kind is ActionKind.FIXTURE and self in finalizers:
            gen = finalizers.pop(self)
            if gen is None:
                return
            try:
                next(gen)
            except StopIteration:
                return
            gen.close()
            raise DeclarationError(f"fixture {self.name!r} yielded more than once")


class Unit:
    """One test case: a description and a body taking its context.

    Properties:
        description: Human readable description (str)
        body: Callable taking the unit's Context, or None for a declared skip
        skip_reason: Reason the unit is skipped (str) or None when it runs
        group: Group that declared the unit
    """

    def __init__(self, description: str, body, group: Group, skip_reason: str | None = None) -> None:
        self.description = description
        self.body = body
        self.group = group
        self.skip_reason = skip_reason

    @property
    def path(self) -> str:
        return f"{self.group.path}{PATH_SEPARATOR}{self.description}"

    def __repr__(self) -> str:
        return f"<Unit {self.path!r}>"


class Group:
    """A named group of units and nested groups sharing setup and teardown.

    Setup actions of one scope run in declaration order; teardown actions run in
    reverse declaration order. Unit-scope actions of a group also wrap every
    unit of its nested groups, outermost group first on the way in.
    """

    def __init__(self, name: str, parent: Group | None = None) -> None:
        self.name = name
        self.parent = parent
        self.children: list[Unit | Group] = []
        self.running = False
        self.__actions: dict[Scope, list[Action]] = {Scope.UNIT: [], Scope.GROUP: []}

    @property
    def path(self) -> str:
        if self.parent is None:
            return self.name
        return f"{self.parent.path}{PATH_SEPARATOR}{self.name}"

    def lineage(self) -> list[Group]:
        """This group and its ancestors, outermost first."""
        chain = []
        group = self
        while group is not None:
            chain.append(group)
            group = group.parent
        return chain[::-1]

    def actions(self, scope: Scope) -> list[Action]:
        return list(self.__actions[Scope(scope)])

    def units(self) -> Iterator[Unit]:
        """Every unit of this group and its nested groups, in run order."""
        for child in self.children:
            if isinstance(child, Group):
                yield from child.units()
            else:
                yield child

    # Nested groups

    def group(self, name: str) -> Group:
        self._check_open()
        child = Group(name, parent=self)
        self.children.append(child)
        return child

    def __enter__(self) -> Group:
        return self

    def __exit__(self, *exc_info) -> None:
        return None

    # Units

    def unit(self, description: str, skip: str | None = None):
        """Decorator declaring func as a unit body; skip=reason declares it skipped."""

        def decorator(func):
            self._check_callable(func, "unit body")
            self._check_open()
            self.children.append(Unit(description, func, self, skip_reason=skip))
            return func

        return decorator

    def skip(self, description: str, reason: str) -> Unit:
        """Declares a unit that is reported as skipped with reason and never runs."""
        self._check_open()
        unit = Unit(description, None, self, skip_reason=reason)
        self.children.append(unit)
        return unit

    # Hooks

    def before_each(self, func):
        return self._add(func, Scope.UNIT, ActionKind.BEFORE)

    def after_each(self, func):
        return self._add(func, Scope.UNIT, ActionKind.AFTER)

    def before_all(self, func):
        return self._add(func, Scope.GROUP, ActionKind.BEFORE)

    def after_all(self, func):
        return self._add(func, Scope.GROUP, ActionKind.AFTER)

    def fixture(self, func=None, *, name: str | None = None, scope: Scope | str = Scope.UNIT):
        """Declares a named fixture constructor.

        scope='unit' builds a fresh value for every unit; scope='group' builds
        one value per group run and shares it with every unit in the group.
        Usable bare (``@g.fixture``) or with arguments (``@g.fixture(scope="group")``).
        """
        try:
            scope = Scope(scope)
        except ValueError:
            raise DeclarationError(f"unknown fixture scope {scope!r}") from None

        def decorator(f):
            return self._add(f, scope, ActionKind.FIXTURE, name=name)

        if func is None:
            return decorator
        return decorator(func)

    def _add(self, func, scope: Scope, kind: ActionKind, name: str | None = None):
        self._check_callable(func, f"{kind.value} action")
        self._check_open()
        name = name or getattr(func, "__name__", repr(func))
        if kind is ActionKind.FIXTURE:
            if is_reserved(name):
                raise DeclarationError(f"{name!r} is reserved on a context and cannot name a fixture")
            declared = [a.name for s in Scope for a in self.__actions[s] if a.kind is ActionKind.FIXTURE]
            if name in declared:
                raise DeclarationError(f"fixture {name!r} is already declared in group {self.path!r}")
        self.__actions[scope].append(Action(name, func, scope, kind))
        return func

    def _check_open(self) -> None:
        if any(g.running for g in self.lineage()):
            raise DeclarationError(f"group {self.path!r} cannot be changed while it is running")

    @staticmethod
    def _check_callable(func, what: str) -> None:
        if not callable(func):
            raise DeclarationError(f"{what} must be callable, got {func!r}")

    def __repr__(self) -> str:
        return f"<Group {self.path!r} children={len(self.children)}>"
