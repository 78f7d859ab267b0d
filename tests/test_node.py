import io
import xml.etree.ElementTree as ET

from netlist.indentation import Indentation
from netlist.node import NOID, Node
from netlist.term import Direction, Term


class _FakeCell:
    def __init__(self):
        self.terms = []
        self.instances = {}
        self.nets = {}

    def add(self, term):
        self.terms.append(term)

    def get_term(self, name):
        return next((t for t in self.terms if t.name == name), None)

    def get_instance(self, name):
        return self.instances.get(name)

    def get_net(self, name):
        return self.nets.get(name)


class _FakeNet:
    def __init__(self, cell):
        self.cell = cell
        self.nodes = []

    def add(self, node):
        node.id = len(self.nodes)
        self.nodes.append(node)

    def remove(self, node):
        if node in self.nodes:
            self.nodes.remove(node)
            return True
        return False


class _FakeInstance:
    def __init__(self, name, cell, model_cell):
        self.name = name
        self.cell = cell
        self.terms = [Term.from_model(self, t) for t in model_cell.terms]

    def get_term(self, name):
        return next((t for t in self.terms if t.name == name), None)


def test_default_id_and_position():
    cell = _FakeCell()
    term = Term(cell, "a", Direction.IN)
    node = Node(term)
    assert node.id == NOID
    assert (node.position.x, node.position.y) == (0, 0)
    assert node.net is None


def test_node_joins_net_of_its_term():
    cell = _FakeCell()
    net = _FakeNet(cell)
    term = Term(cell, "a", Direction.IN)
    term.set_net(net)
    node = Node(term, 9)
    assert node.net is net
    assert node in net.nodes
    assert len(net.nodes) == 2


def test_detach_removes_from_net():
    cell = _FakeCell()
    net = _FakeNet(cell)
    term = Term(cell, "a", Direction.IN)
    term.set_net(net)
    node = Node(term)
    node.detach()
    assert node not in net.nodes
    assert term.node in net.nodes


def test_to_xml_external_term():
    cell = _FakeCell()
    term = Term(cell, "a", Direction.IN)
    node = Node(term, 3)
    node.position.x, node.position.y = 1, 2
    out = io.StringIO()
    ind = Indentation()
    ind.increase()
    node.to_xml(out, ind)
    text = out.getvalue()
    assert text == '  <node term="a" id="3" x="1" y="2"/>\n'


def test_to_xml_instance_term_round_trips_attributes():
    model = _FakeCell()
    Term(model, "q", Direction.OUT)
    owner = _FakeCell()
    inst = _FakeInstance("u1", owner, model)
    node = Node(inst.get_term("q"), 4)
    out = io.StringIO()
    node.to_xml(out, Indentation())
    element = ET.fromstring(out.getvalue())
    assert element.tag == "node"
    assert element.attrib == {
        "term": "q",
        "instance": "u1",
        "id": "4",
        "x": "0",
        "y": "0",
    }


def test_from_xml_external_term():
    cell = _FakeCell()
    term = Term(cell, "a", Direction.IN)
    net = _FakeNet(cell)
    assert Node.from_xml(net, ET.fromstring('<node term="a" id="5"/>')) is True
    assert len(net.nodes) == 1
    assert net.nodes[0].term is term


def test_from_xml_instance_term():
    model = _FakeCell()
    Term(model, "i0", Direction.IN)
    owner = _FakeCell()
    inst = _FakeInstance("u1", owner, model)
    owner.instances["u1"] = inst
    net = _FakeNet(owner)
    element = ET.fromstring('<node term="i0" instance="u1" id="0"/>')
    assert Node.from_xml(net, element) is True
    assert net.nodes[0].term is inst.get_term("i0")


def test_from_xml_unknown_term_is_false():
    cell = _FakeCell()
    net = _FakeNet(cell)
    assert Node.from_xml(net, ET.fromstring('<node term="zz" id="0"/>')) is False
    assert net.nodes == []


def test_from_xml_unknown_instance_is_false():
    cell = _FakeCell()
    Term(cell, "a", Direction.IN)
    net = _FakeNet(cell)
    element = ET.fromstring('<node term="a" instance="nope" id="0"/>')
    assert Node.from_xml(net, element) is False


def test_from_xml_unknown_instance_term_is_false():
    model = _FakeCell()
    Term(model, "i0", Direction.IN)
    owner = _FakeCell()
    owner.instances["u1"] = _FakeInstance("u1", owner, model)
    net = _FakeNet(owner)
    element = ET.fromstring('<node term="zz" instance="u1" id="0"/>')
    assert Node.from_xml(net, element) is False