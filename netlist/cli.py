"""Command line: load cells from a directory and print the last one as XML."""

from __future__ import annotations

import argparse
import sys

from .cell import Cell
from .indentation import Indentation
from .xmlutil import NetlistError

DEFAULT_CELLS = ("and2", "or2", "xor2", "halfadder")


def main(argv: list[str] | None = None) -> int:
    """Load the named cells in order and dump the last one to standard output."""
    parser = argparse.ArgumentParser(
        prog="netlist",
        description="Load netlist cells and print the last one as XML.",
    )
    parser.add_argument(
        "-d", "--directory", default="cells", help="directory holding <name>.xml files"
    )
    parser.add_argument(
        "cells",
        nargs="*",
        default=list(DEFAULT_CELLS),
        help="cells to load; models first, the cell to print last",
    )
    args = parser.parse_args(argv)

    loaded: list[Cell] = []
    try:
        print("Chargement des modeles:")
        for name in args.cells:
            print(f"- <{name}> ...")
            loaded.append(Cell.load(name, args.directory))
        top = loaded[-1]
        print(f"\nContenu du <{top.name}>:")
        top.to_xml(sys.stdout, Indentation())
    except (OSError, NetlistError) as exc:
        print(f"[ERROR] {exc}", file=sys.stderr)
        return 1
    finally:
        for cell in reversed(loaded):
            cell.release()
    return 0


if __name__ == "__main__":
    sys.exit(main())