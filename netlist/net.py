"""Nets: the wires joining terminal nodes inside a cell."""

from __future__ import annotations

import logging
from typing import IO, Any
from xml.etree.ElementTree import Element

from .indentation import Indentation
from .node import Node
from .term import TermType
from .xmlutil import XmlFormatError, get_attribute

_log = logging.getLogger(__name__)


class Net:
    """A named net of a cell, holding the nodes it connects."""

    def __init__(self, cell: Any, name: str, type: TermType = TermType.EXTERNAL) -> None:
        self.cell = cell
        self.name = name
        self.type = type
        self.nodes: list[Node | None] = []
        cell.add(self)
        self.id: int = cell.new_net_id()

    def free_node_id(self) -> int:
        """Index of the first empty node slot, or the number of slots."""
        return next(
            (index for index, node in enumerate(self.nodes) if node is None),
            len(self.nodes),
        )

    def add(self, node: Node) -> None:
        """Put node in the first free slot and give it that slot's id."""
        index = self.free_node_id()
        if index < len(self.nodes):
            self.nodes[index] = node
        else:
            self.nodes.append(node)
        node.id = index

    def remove(self, node: Node) -> bool:
        """Empty the slot holding node; False if it is not on this net."""
        for index, slot in enumerate(self.nodes):
            if slot is node:
                self.nodes[index] = None
                return True
        return False

    def release(self) -> None:
        """Detach every terminal connected to this net."""
        for node in list(self.nodes):
            if node is None:
                continue
            term = node.term
            if term.net is self:
                term.set_net(None)
            else:
                _log.warning(
                    "Net %s: node of term <%s> points to another net", self.name, term.name
                )

    def to_xml(self, stream: IO[str], indentation: Indentation) -> None:
        """Write this net and its nodes as a <net> element."""
        stream.write(f'{indentation}<net name="{self.name}" type="{self.type}">\n')
        indentation.increase()
        for node in self.nodes:
            if node is not None:
                node.to_xml(stream, indentation)
        indentation.decrease()
        stream.write(f"{indentation}</net>\n")

    @classmethod
    def from_xml(cls, cell: Any, element: Element) -> Net:
        """Create a net of cell, with its nodes, from a <net> element."""
        name = get_attribute(element, "name") or ""
        if not name:
            raise XmlFormatError(f"Unknown or misplaced tag <{element.tag}>: net without a name.")
        net = cls(cell, name, TermType.EXTERNAL)
        for child in element:
            if child.tag != "node" or not Node.from_xml(net, child):
                raise XmlFormatError(
                    f"Unknown or misplaced tag <{child.tag}> in net <{name}>."
                )
        return net