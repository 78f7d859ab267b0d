"""Hierarchical netlist model of cells, terms, instances and nets, with XML load and save."""

__version__ = "0.1.0"
__all__ = ["cell", "cli", "indentation", "instance", "net", "node", "point", "term", "xmlutil"]