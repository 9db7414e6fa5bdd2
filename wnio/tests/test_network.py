import unittest

import wnio
from wnio.network import NetworkDefinition, Junction, Tank, Reservoir, Pipe, Pump, NodeType, LinkType


class TestNetworkDefinition(unittest.TestCase):

    @classmethod
    def setUpClass(self):
        self.junction = Junction("J1", attributes={"710": "0"})
        self.tank = Tank("T1", 0.0, 0.0, 5.0, 1.0)
        self.reservoir = Reservoir("R1", 1.0, 2.0, 800.0)
        self.pipe = Pipe("P1", "R1", "J1", 100.5, 12.0)
        self.pump = Pump("PU1", "J1", "T1", {"HEAD": "C1"})
        self.wn = NetworkDefinition(name="test.inp",
                                    junctions=(self.junction,),
                                    tanks=(self.tank,),
                                    reservoirs=(self.reservoir,),
                                    pipes=(self.pipe,),
                                    pumps=(self.pump,))

    def test_validate_true(self):
        self.assertTrue(self.wn.validate())
        self.assertTrue(NetworkDefinition(junctions=(self.junction,), pipes=(self.pipe,),
                                          tanks=(self.tank,)).validate())
        self.assertTrue(NetworkDefinition(junctions=(self.junction,), pipes=(self.pipe,),
                                          reservoirs=(self.reservoir,)).validate())

    def test_validate_false(self):
        self.assertFalse(NetworkDefinition().validate())
        self.assertFalse(NetworkDefinition(junctions=(self.junction,), pipes=(self.pipe,)).validate())
        self.assertFalse(NetworkDefinition(pipes=(self.pipe,), tanks=(self.tank,)).validate())
        self.assertFalse(NetworkDefinition(junctions=(self.junction,), reservoirs=(self.reservoir,),
                                           pumps=(self.pump,)).validate())

    def test_summary(self):
        self.assertEqual(self.wn.summary(),
                         "Nodes: 1\nPipes: 1\nPumps: 1\nTanks: 1\nReservoirs: 1\n")
        self.assertEqual(NetworkDefinition().summary(),
                         "Nodes: 0\nPipes: 0\nPumps: 0\nTanks: 0\nReservoirs: 0\n")

    def test_print_summary(self):
        from contextlib import redirect_stdout
        from io import StringIO
        out = StringIO()
        with redirect_stdout(out):
            self.wn.print_summary()
        self.assertEqual(out.getvalue(), self.wn.summary())

    def test_node_and_link_access(self):
        self.assertListEqual([n.name for n in self.wn.nodes()], ["J1", "T1", "R1"])
        self.assertListEqual([l.name for l in self.wn.links()], ["P1", "PU1"])
        self.assertIs(self.wn.get_node("R1"), self.reservoir)
        self.assertIs(self.wn.get_link("PU1"), self.pump)
        with self.assertRaises(KeyError):
            self.wn.get_node("P1")
        with self.assertRaises(KeyError):
            self.wn.get_link("J1")

    def test_category_tags(self):
        self.assertListEqual([n.node_type for n in self.wn.nodes()],
                             [NodeType.Junction, NodeType.Tank, NodeType.Reservoir])
        self.assertListEqual([l.link_type for l in self.wn.links()], [LinkType.Pipe, LinkType.Pump])
        self.assertEqual(str(NodeType.Tank), "Tank")

    def test_records_are_frozen(self):
        with self.assertRaises(AttributeError):
            self.pipe.length = 1.0
        with self.assertRaises(AttributeError):
            self.wn.pipes = ()

    def test_link_ends_not_checked(self):
        pipe = Pipe("P9", "nowhere", "J1", 1.0, 1.0)
        wn = NetworkDefinition(junctions=(self.junction,), pipes=(pipe,), tanks=(self.tank,))
        self.assertTrue(wn.validate())


if __name__ == "__main__":
    unittest.main()
