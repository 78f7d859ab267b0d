"""Connection points of terminals on nets."""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any
from xml.etree.ElementTree import Element

from .indentation import Indentation
from .point import Point
from .xmlutil import get_attribute, get_int_attribute

if TYPE_CHECKING:
    from .term import Term

NOID = 2**64 - 1


class Node:
    """The point through which a terminal is attached to a net."""

    def __init__(self, term: Term, id: int = NOID) -> None:
        self.id = id
        self.term = term
        self.position = Point()
        if term.net is not None:
            term.net.add(self)

    @property
    def net(self) -> Any:
        """The net of the owning terminal, if any."""
        return self.term.net

    def detach(self) -> None:
        """Remove this node from the net it belongs to."""
        if self.net is not None:
            self.net.remove(self)

    def to_xml(self, stream: IO[str], indentation: Indentation) -> None:
        """Write this node as a <node> element."""
        parts = [f'{indentation}<node term="{self.term.name}"']
        instance = self.term.instance
        if instance is not None:
            parts.append(f' instance="{instance.name}"')
        parts.append(
            f' id="{self.id}" x="{self.position.x}" y="{self.position.y}"/>\n'
        )
        stream.write("".join(parts))

    @staticmethod
    def from_xml(net: Any, element: Element) -> bool:
        """Create a node on net from a <node> element; False if its term is unknown."""
        term_name = get_attribute(element, "term") or ""
        node_id = get_int_attribute(element, "id")
        instance_name = get_attribute(element, "instance")

        if instance_name is not None:
            instance = net.cell.get_instance(instance_name)
            if instance is None:
                return False
            term = instance.get_term(term_name)
        else:
            term = net.cell.get_term(term_name)

        if term is None:
            return False
        net.add(Node(term, node_id))
        return True