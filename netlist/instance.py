"""Instances: placed copies of a model cell inside another cell."""

from __future__ import annotations

from typing import IO, Any
from xml.etree.ElementTree import Element

from .indentation import Indentation
from .point import Point
from .term import Term
from .xmlutil import XmlFormatError, get_attribute, get_int_attribute


class Instance:
    """An occurrence of a master cell inside an owner cell."""

    def __init__(self, owner: Any, model: Any, name: str) -> None:
        self.cell = owner
        self.master_cell = model
        self.name = name
        self.terms: list[Term | None] = [Term.from_model(self, term) for term in model.terms]
        self.position = Point()
        owner.add(self)

    def get_term(self, name: str) -> Term | None:
        """The instance terminal with this name, or None."""
        return next(
            (term for term in self.terms if term is not None and term.name == name),
            None,
        )

    def connect(self, name: str, net: Any) -> bool:
        """Attach the named terminal to net; False if there is no such terminal."""
        term = self.get_term(name)
        if term is None:
            return False
        term.set_net(net)
        return True

    def add(self, term: Term) -> None:
        """Put term in the first empty slot, or append it."""
        for index, slot in enumerate(self.terms):
            if slot is None:
                self.terms[index] = term
                return
        self.terms.append(term)

    def remove(self, term: Term) -> None:
        """Empty every slot holding term."""
        self.terms = [None if slot is term else slot for slot in self.terms]

    def set_position(self, x: int | Point, y: int | None = None) -> None:
        """Place the instance at a point or at (x, y)."""
        if isinstance(x, Point):
            if y is not None:
                raise TypeError("set_position() takes a Point or two integers")
            self.position = Point(x.x, x.y)
        else:
            if y is None:
                raise TypeError("set_position() needs both x and y")
            self.position = Point(x, y)

    def release(self) -> None:
        """Detach and drop all of this instance's terminals."""
        for term in self.terms:
            if term is not None:
                term.release()
        self.terms = [None] * len(self.terms)

    def to_xml(self, stream: IO[str], indentation: Indentation) -> None:
        """Write this instance as an <instance> element."""
        stream.write(
            f'{indentation}<instance name="{self.name}"'
            f' mastercell="{self.master_cell.name}"'
            f' x="{self.position.x}" y="{self.position.y}"/>\n'
        )

    @classmethod
    def from_xml(cls, cell: Any, element: Element) -> Instance:
        """Create an instance inside cell from an <instance> element."""
        name = get_attribute(element, "name") or ""
        master_name = get_attribute(element, "mastercell") or ""
        # Master cells are looked up in the library the owner cell belongs to.
        master = cell.find(master_name)
        if master is None:
            raise XmlFormatError(
                f"Instance <{name}>: unknown master cell <{master_name}>."
            )
        x = get_int_attribute(element, "x")
        y = get_int_attribute(element, "y")
        instance = cls(cell, master, name)
        instance.set_position(x, y)
        return instance