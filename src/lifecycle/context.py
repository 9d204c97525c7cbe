"""Explicit fixture state handed to hooks and unit bodies.

Every group run gets one Context, built once and shared by reference with every
unit in the group. Every unit gets a fresh Context layered on top of its
group's. Reading an attribute looks in the unit layer first and then outwards
through the enclosing groups; assigning an attribute always writes the layer it
is made on. Replacing ``ctx.box`` inside a unit therefore never reaches the
group, while mutating the object behind ``ctx.box`` does, and every later unit
of the group sees that mutation.
"""

from __future__ import annotations

from collections import ChainMap
from typing import Any

from lifecycle.exception import Skipped
from lifecycle.logger import LOGGER

_RESERVED = frozenset({"name", "parent", "logger", "shared", "skip", "get", "local_names"})


def is_reserved(attr: str) -> bool:
    """True when attr cannot be set on a context, and so cannot name a fixture."""
    return attr in _RESERVED or attr.startswith("_")


class Context:
    """Attribute bag for one group run or one unit run.

    Properties:
        name: Path of the group or unit this context belongs to (str)
        parent: Enclosing group context, or None for an outermost group
        shared: The nearest group context; the object every unit of that group shares
        logger: Harness logger, for unit bodies that want their output captured
    """

    def __init__(self, name: str, parent: Context | None = None) -> None:
        values = parent.__dict__["_values"].new_child() if parent is not None else ChainMap()
        self.__dict__.update(_values=values, name=name, parent=parent, logger=LOGGER)

    @property
    def shared(self) -> Context | None:
        return self.parent

    def __getattr__(self, attr: str) -> Any:
        values = self.__dict__.get("_values")
        if values is None or attr not in values:
            raise AttributeError(f"{self.__dict__.get('name')!r} has no fixture named {attr!r}")
        return values[attr]

    def __setattr__(self, attr: str, value: Any) -> None:
        if is_reserved(attr):
            raise AttributeError(f"{attr!r} is reserved on a context")
        self.__dict__["_values"][attr] = value

    def __delattr__(self, attr: str) -> None:
        try:
            del self.__dict__["_values"].maps[0][attr]
        except KeyError:
            raise AttributeError(f"{attr!r} was not set on {self.name!r}") from None

    def __contains__(self, attr: str) -> bool:
        return attr in self.__dict__["_values"]

    def get(self, attr: str, default: Any = None) -> Any:
        return self.__dict__["_values"].get(attr, default)

    def local_names(self) -> list[str]:
        """Names set directly on this context, in assignment order."""
        return list(self.__dict__["_values"].maps[0])

    def skip(self, reason: str = "") -> None:
        """Stops the running unit and reports it as skipped with reason."""
        raise Skipped(reason)

    def __repr__(self) -> str:
        return f"<Context {self.name!r} {sorted(self.__dict__['_values'])}>"
