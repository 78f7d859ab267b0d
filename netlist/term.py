"""Terminals of cells and of instances."""

from __future__ import annotations

from enum import Enum
from typing import IO, Any
from xml.etree.ElementTree import Element

from .indentation import Indentation
from .node import Node
from .point import Point
from .xmlutil import NetlistError, get_attribute, get_int_attribute


class Direction(Enum):
    """Signal direction of a terminal."""

    IN = 1
    OUT = 2
    INOUT = 3
    TRISTATE = 4
    TRANSCV = 5
    UNKNOWN = 6

    @classmethod
    def from_string(cls, text: str) -> Direction:
        """Parse a direction name; anything unrecognised is UNKNOWN."""
        for direction in cls:
            if str(direction) == text:
                return direction
        return cls.UNKNOWN

    def __str__(self) -> str:
        return _DIRECTION_NAMES[self]


_DIRECTION_NAMES = {
    Direction.IN: "In",
    Direction.OUT: "Out",
    Direction.INOUT: "Inout",
    Direction.TRISTATE: "Tristate",
    Direction.TRANSCV: "Transcv",
    Direction.UNKNOWN: "Unknown",
}


class TermType(Enum):
    """Whether a terminal belongs to a cell or to an instance."""

    INTERNAL = 1
    EXTERNAL = 2

    def __str__(self) -> str:
        return "Internal" if self is TermType.INTERNAL else "External"


class Term:
    """A terminal, owned by a cell (external) or by an instance (internal)."""

    def __init__(self, cell: Any, name: str, direction: Direction) -> None:
        self._setup(cell, name, direction, TermType.EXTERNAL, None)
        cell.add(self)

    def _setup(
        self,
        owner: Any,
        name: str,
        direction: Direction,
        type_: TermType,
        net: Any,
    ) -> None:
        self._owner = owner
        self.name = name
        self.direction = direction
        self.type = type_
        self.net = net
        self.node = Node(self)

    @classmethod
    def from_model(cls, instance: Any, model: Term) -> Term:
        """Build an instance terminal copying the model terminal."""
        term = cls.__new__(cls)
        term._setup(instance, model.name, model.direction, TermType.INTERNAL, model.net)
        return term

    @property
    def is_internal(self) -> bool:
        return self.type is TermType.INTERNAL

    @property
    def is_external(self) -> bool:
        return self.type is TermType.EXTERNAL

    @property
    def cell(self) -> Any:
        """The owning cell of an external terminal, else None."""
        return self._owner if self.is_external else None

    @property
    def instance(self) -> Any:
        """The owning instance of an internal terminal, else None."""
        return self._owner if self.is_internal else None

    @property
    def owner_cell(self) -> Any:
        """The cell in which this terminal lives."""
        return self._owner if self.is_external else self._owner.cell

    @property
    def position(self) -> Point:
        return self.node.position

    def set_position(self, x: int | Point, y: int | None = None) -> None:
        """Place the terminal at a point or at (x, y)."""
        if isinstance(x, Point):
            self.node.position = Point(x.x, x.y)
        else:
            if y is None:
                raise TypeError("set_position() needs both x and y")
            self.node.position = Point(x, y)

    def set_net(self, net: Any) -> None:
        """Attach to a net (or a net name in the owner cell); None detaches."""
        if isinstance(net, str):
            found = self.owner_cell.get_net(net)
            if found is None:
                raise NetlistError(f"Term.set_net(): no net named <{net}>")
            net = found
        if net is None:
            if self.net is not None:
                self.net.remove(self.node)
                self.net = None
        else:
            self.net = net
            net.add(self.node)

    def release(self) -> None:
        """Detach this terminal's node from its net."""
        if self.net is not None:
            self.net.remove(self.node)
        self.net = None

    def to_xml(self, stream: IO[str], indentation: Indentation) -> None:
        """Write this terminal as a <term> element."""
        stream.write(
            f'{indentation}<term name="{self.name}" direction="{self.direction}"'
            f' x="{self.position.x}" y="{self.position.y}"/>\n'
        )

    @classmethod
    def from_xml(cls, cell: Any, element: Element) -> Term:
        """Create an external terminal of cell from a <term> element."""
        name = get_attribute(element, "name") or ""
        direction = Direction.from_string(get_attribute(element, "direction") or "")
        x = get_int_attribute(element, "x")
        y = get_int_attribute(element, "y")
        term = cls(cell, name, direction)
        term.set_position(x, y)
        return term