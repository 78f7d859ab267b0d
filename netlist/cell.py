"""Cells: named netlist models holding terminals, instances and nets."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import IO, Callable, ClassVar, Union
from xml.etree import ElementTree
from xml.etree.ElementTree import Element

from .indentation import Indentation
from .instance import Instance
from .net import Net
from .term import Term
from .xmlutil import NetlistError, XmlFormatError, get_attribute

_log = logging.getLogger(__name__)

XmlSource = Union[str, "os.PathLike[str]", IO[str], IO[bytes], Element]


class Cell:
    """A netlist model; every living cell is kept in a registry by name."""

    _cells: ClassVar[list[Cell]] = []

    @classmethod
    def all_cells(cls) -> list[Cell]:
        """Every registered cell, in creation order."""
        return list(Cell._cells)

    @classmethod
    def find(cls, name: str) -> Cell | None:
        """The registered cell with this name, or None."""
        return next((cell for cell in Cell._cells if cell.name == name), None)

    def __init__(self, name: str) -> None:
        if self.find(name) is not None:
            raise NetlistError(f"Attempt to create duplicate of Cell <{name}>.")
        self._name = name
        self.terms: list[Term] = []
        self.instances: list[Instance] = []
        self.nets: list[Net] = []
        self._max_net_id = 0
        Cell._cells.append(self)

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, new_name: str) -> None:
        if new_name == self._name:
            return
        if self.find(new_name) is not None:
            raise NetlistError(f"New Cell name <{new_name}> already exists.")
        self._name = new_name

    def get_instance(self, name: str) -> Instance | None:
        """The instance with this name, or None."""
        return next((inst for inst in self.instances if inst.name == name), None)

    def get_term(self, name: str) -> Term | None:
        """The terminal with this name, or None."""
        return next((term for term in self.terms if term.name == name), None)

    def get_net(self, name: str) -> Net | None:
        """The net with this name, or None."""
        return next((net for net in self.nets if net.name == name), None)

    def add(self, item: Instance | Term | Net) -> None:
        """Register an instance, terminal or net; names must be unique per kind."""
        if isinstance(item, Instance):
            if self.get_instance(item.name) is not None:
                raise NetlistError(f"Attempt to add duplicated instance <{item.name}>.")
            self.instances.append(item)
        elif isinstance(item, Term):
            if self.get_term(item.name) is not None:
                raise NetlistError(f"Attempt to add duplicated terminal <{item.name}>.")
            self.terms.append(item)
        elif isinstance(item, Net):
            if self.get_net(item.name) is not None:
                raise NetlistError(f"Attempt to add duplicated Net <{item.name}>.")
            self.nets.append(item)
        else:
            raise TypeError(f"cannot add {type(item).__name__} to a Cell")

    def remove(self, item: Instance | Term | Net) -> None:
        """Forget an instance, terminal or net of this cell."""
        if isinstance(item, Instance):
            self.instances = [inst for inst in self.instances if inst is not item]
        elif isinstance(item, Term):
            self.terms = [term for term in self.terms if term is not item]
        elif isinstance(item, Net):
            self.nets = [net for net in self.nets if net is not item]
        else:
            raise TypeError(f"cannot remove {type(item).__name__} from a Cell")

    def connect(self, name: str, net: Net | None) -> bool:
        """Attach the named terminal to net; False if there is no such terminal."""
        term = self.get_term(name)
        if term is None:
            return False
        term.set_net(net)
        return True

    def new_net_id(self) -> int:
        """Hand out the next net identifier."""
        net_id = self._max_net_id
        self._max_net_id += 1
        return net_id

    def release(self) -> None:
        """Unregister the cell and detach all of its nets, instances and terminals."""
        Cell._cells[:] = [cell for cell in Cell._cells if cell is not self]
        for net in self.nets:
            net.release()
        for instance in self.instances:
            instance.release()
        for term in self.terms:
            term.release()
        self.nets = []
        self.instances = []
        self.terms = []

    def to_xml(self, stream: IO[str], indentation: Indentation | None = None) -> None:
        """Write the whole cell as an XML document."""
        ind = Indentation() if indentation is None else indentation
        write = stream.write
        write(f'{ind}<?xml version="1.0"?>\n')
        write(f'{ind}<cell name="{self.name}">\n')
        ind.increase()
        write(f"{ind}<terms>\n")
        ind.increase()
        for term in self.terms:
            term.to_xml(stream, ind)
        ind.decrease()
        write(f"{ind}</terms>\n")
        write(f"{ind}<instances>\n")
        ind.increase()
        for instance in self.instances:
            instance.to_xml(stream, ind)
        ind.decrease()
        write(f"{ind}</instances>\n")
        write(f"{ind}<nets>\n")
        ind.increase()
        for net in self.nets:
            net.to_xml(stream, ind)
        ind.decrease()
        write(f"{ind}</nets>\n")
        ind.decrease()
        write(f"{ind}</cell>\n")

    @classmethod
    def from_xml(cls, source: XmlSource) -> Cell:
        """Build a cell from an XML file, stream or parsed <cell> element."""
        if isinstance(source, Element):
            root = source
        else:
            try:
                root = ElementTree.parse(source).getroot()
            except ElementTree.ParseError as exc:
                raise XmlFormatError(f"Cell.from_xml(): {exc}") from exc

        if root.tag != "cell":
            raise XmlFormatError(f"Unknown or misplaced tag <{root.tag}>.")
        name = get_attribute(root, "name") or ""
        if not name:
            raise XmlFormatError("Unknown or misplaced tag <cell>: cell without a name.")

        cell = cls(name)
        try:
            cell._read_sections(root)
        except Exception:
            cell.release()
            raise
        return cell

    def _read_sections(self, root: Element) -> None:
        expected = iter(_SECTIONS)
        for section in root:
            spec = next(expected, None)
            if spec is None or spec[0] != section.tag:
                raise XmlFormatError(f"Unknown or misplaced tag <{section.tag}>.")
            _, child_tag, reader = spec
            for child in section:
                if child.tag != child_tag:
                    raise XmlFormatError(f"Unknown or misplaced tag <{child.tag}>.")
                reader(self, child)

    @classmethod
    def load(cls, name: str, directory: str | os.PathLike[str] = "cells") -> Cell:
        """Read the cell stored as <directory>/<name>.xml."""
        path = Path(directory) / f"{name}.xml"
        with path.open("rb") as stream:
            return cls.from_xml(stream)

    def save(self, directory: str | os.PathLike[str] = ".") -> Path:
        """Write the cell to <directory>/<name>.xml and return the path."""
        path = Path(directory) / f"{self.name}.xml"
        with path.open("w", encoding="utf-8") as stream:
            _log.info("Saving <Cell %s> in <%s>", self.name, path)
            self.to_xml(stream, Indentation())
        return path


_SECTIONS: tuple[tuple[str, str, Callable[[Cell, Element], object]], ...] = (
    ("terms", "term", Term.from_xml),
    ("instances", "instance", Instance.from_xml),
    ("nets", "net", Net.from_xml),
)