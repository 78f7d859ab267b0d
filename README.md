# netlist

A small model of hierarchical electronic netlists. A design is built from
**cells**. Each cell has external **terms** (terminals with a direction),
**instances** of other cells, and **nets** that join terms together through
**nodes**. Cells are read from and written to a simple XML format.

## Installation

```
pip install .
```

Add the `test` extra (`pip install .[test]`) to run the test suite with pytest.

## Building a netlist in code

```python
import sys

from netlist.cell import Cell
from netlist.indentation import Indentation
from netlist.instance import Instance
from netlist.net import Net
from netlist.term import Direction, Term, TermType

and2 = Cell("and2")
Term(and2, "i0", Direction.IN)
Term(and2, "i1", Direction.IN)
Term(and2, "q", Direction.OUT)

top = Cell("top")
Term(top, "a", Direction.IN)
gate = Instance(top, and2, "and_1")
gate.set_position(10, 20)

net_a = Net(top, "a", TermType.EXTERNAL)
top.connect("a", net_a)
gate.connect("i0", net_a)

top.to_xml(sys.stdout, Indentation(2))
```

Creating a `Term`, `Instance` or `Net` registers it with its cell. An instance
gets its own copy of every term of its master cell. Attaching a term to a net
(`Cell.connect`, `Instance.connect` or `Term.set_net`) adds the term's node to
the net, and the node's id becomes its slot number on the net.

Every `Cell` is kept in a registry by name. `Cell.find(name)` looks a cell up,
`Cell.all_cells()` lists them, and `Cell.release()` takes a cell out of the
registry and detaches its nets, instances and terms. Cell names must be unique,
and within a cell so must the names of its terms, of its instances and of its
nets.

## XML format

A cell's XML holds `<terms>`, `<instances>` and `<nets>` sections, in that
order. Terms carry a name, a direction (`In`, `Out`, `Inout`, `Tristate`,
`Transcv` or `Unknown`) and a position. Instances carry a name, the name of
their master cell and a position. Nets list their nodes with the term they
connect, the instance that owns it (when the term belongs to an instance), the
node id and a position. Names are written as they are, without XML escaping.

## Loading and saving

- `Cell.from_xml(source)` builds a cell from a file path, an open text or binary
  stream, or an already parsed `<cell>` element.
- `Cell.load(name, directory="cells")` reads `<directory>/<name>.xml`.
- `Cell.save(directory=".")` writes the cell to `<directory>/<name>.xml` and
  returns the path.

Instances refer to their master cell by name, so the master cells must be
loaded or created first. If reading fails partway, the half-built cell is
released before the error is raised.

Malformed or misplaced XML, a missing integer attribute, or an unknown master
cell raises `XmlFormatError`. Errors in the model, such as a duplicate cell or
term name, raise `NetlistError`. Both are defined in `netlist.xmlutil`; a missing
file raises the usual `OSError`.

## Command line

```
netlist
```

This loads the `and2`, `or2` and `xor2` model cells and the `halfadder` cell
from the `./cells` directory, in that order, then prints the last one as XML.
Other cells can be named on the command line (models first, the cell to print
last), and `-d`/`--directory` chooses another directory:

```
netlist -d mycells inv nand2 top
```

On a missing file or a netlist error the command prints `[ERROR] ...` to
standard error and exits with status 1.