import unittest

from txnet.core.graph import Graph
from txnet.services.path_finder import path_length, shortest_path


def _graph(*edges) -> Graph:
    g = Graph()
    g.add_edges(edges)
    return g


class ShortestPathTests(unittest.TestCase):
    def test_shortest_path_through_middle(self) -> None:
        g = _graph(("A", "B"), ("B", "C"))

        self.assertEqual(shortest_path(g, "A", "C"), ["A", "B", "C"])

    def test_prefers_direct_edge(self) -> None:
        g = _graph(("A", "B"), ("A", "C"), ("B", "C"))

        path = shortest_path(g, "A", "C")
        self.assertEqual(path, ["A", "C"])
        self.assertEqual(path_length(path), 1)

    def test_same_start_and_goal(self) -> None:
        g = _graph(("A", "B"))

        self.assertEqual(shortest_path(g, "A", "A"), ["A"])
        # even for a node that was never inserted
        self.assertEqual(shortest_path(g, "X", "X"), ["X"])
        self.assertEqual(shortest_path(Graph(), "X", "X"), ["X"])

    def test_disjoint_components_have_no_path(self) -> None:
        g = _graph(("A", "B"), ("C", "D"))

        self.assertIsNone(shortest_path(g, "A", "D"))
        self.assertIsNone(path_length(shortest_path(g, "A", "D")))

    def test_absent_nodes_have_no_path(self) -> None:
        g = _graph(("A", "B"))

        self.assertIsNone(shortest_path(g, "X", "A"))
        self.assertIsNone(shortest_path(g, "A", "X"))

    def test_path_length_equals_bfs_layer(self) -> None:
        # ring of 8 plus a chord 0-4
        ring = [(str(i), str((i + 1) % 8)) for i in range(8)]
        g = _graph(*ring, ("0", "4"))

        expected = {"1": 1, "2": 2, "3": 2, "4": 1, "5": 2, "6": 2, "7": 1}
        for goal, hops in expected.items():
            path = shortest_path(g, "0", goal)
            self.assertEqual(path_length(path), hops, goal)

    def test_path_is_a_walk_over_edges(self) -> None:
        g = _graph(("A", "B"), ("B", "C"), ("C", "D"), ("D", "E"), ("B", "F"), ("F", "E"))

        path = shortest_path(g, "A", "E")
        self.assertEqual(path[0], "A")
        self.assertEqual(path[-1], "E")
        self.assertEqual(len(path), 4)
        for a, b in zip(path, path[1:]):
            self.assertIn(b, g.neighbors(a))

    def test_tie_break_is_deterministic(self) -> None:
        g = _graph(("A", "C"), ("A", "B"), ("C", "D"), ("B", "D"))

        self.assertEqual(shortest_path(g, "A", "D"), ["A", "B", "D"])

    def test_self_loop_does_not_break_search(self) -> None:
        g = _graph(("A", "A"), ("A", "B"), ("B", "C"))

        self.assertEqual(shortest_path(g, "A", "C"), ["A", "B", "C"])


if __name__ == "__main__":
    unittest.main()
