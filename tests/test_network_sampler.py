import random
import unittest

from txnet.core.graph import Graph
from txnet.services.network_sampler import NetworkSampler, average_path_length


def _graph(*edges) -> Graph:
    g = Graph()
    g.add_edges(edges)
    return g


class NetworkSamplerTests(unittest.TestCase):
    def test_seeded_estimate_is_reproducible(self) -> None:
        g = _graph(*[(str(i), str(i + 1)) for i in range(30)], ("0", "15"))

        first = NetworkSampler(g, random.Random(7)).estimate(200)
        second = NetworkSampler(g, random.Random(7)).estimate(200)

        self.assertEqual(first, second)
        self.assertIsNotNone(first.average)

    def test_zero_sample_size_is_undefined(self) -> None:
        g = _graph(("A", "B"), ("B", "C"))

        est = NetworkSampler(g, random.Random(1)).estimate(0)
        self.assertIsNone(est.average)
        self.assertEqual(est.attempted, 0)

    def test_single_node_graph_is_undefined(self) -> None:
        g = _graph(("A", "A"))

        est = NetworkSampler(g, random.Random(1)).estimate(50)
        self.assertIsNone(est.average)
        self.assertEqual(est.identical, 50)

    def test_empty_graph_is_undefined(self) -> None:
        self.assertIsNone(average_path_length(Graph(), 10, random.Random(1)))

    def test_negative_sample_size_rejected(self) -> None:
        with self.assertRaises(ValueError):
            NetworkSampler(Graph(), random.Random(1)).estimate(-1)

    def test_non_positive_progress_interval_rejected(self) -> None:
        g = _graph(("A", "B"))

        with self.assertRaises(ValueError):
            NetworkSampler(g, random.Random(1)).estimate(10, on_progress=lambda e, d: None, progress_every=0)

    def test_single_edge_average_is_one(self) -> None:
        g = _graph(("A", "B"))

        est = NetworkSampler(g, random.Random(3)).estimate(100)
        self.assertGreater(est.connected, 0)
        self.assertEqual(est.average, 1.0)

    def test_disconnected_pairs_are_excluded(self) -> None:
        g = _graph(("A", "B"), ("C", "D"))

        est = NetworkSampler(g, random.Random(11)).estimate(400)
        self.assertGreater(est.disconnected, 0)
        self.assertGreater(est.connected, 0)
        self.assertEqual(est.average, 1.0)
        self.assertEqual(est.total_length, est.connected)

    def test_draw_bookkeeping_adds_up(self) -> None:
        g = _graph(("A", "B"), ("B", "C"), ("C", "D"), ("E", "F"))

        est = NetworkSampler(g, random.Random(5)).estimate(300)
        self.assertEqual(est.attempted, 300)
        self.assertEqual(est.attempted, est.identical + est.disconnected + est.connected)

    def test_average_within_path_bounds(self) -> None:
        # path graph of 6 nodes: every shortest path is 1..5 hops
        g = _graph(*[(str(i), str(i + 1)) for i in range(5)])

        avg = average_path_length(g, 500, random.Random(2))
        self.assertIsNotNone(avg)
        self.assertGreaterEqual(avg, 1.0)
        self.assertLessEqual(avg, 5.0)

    def test_progress_events(self) -> None:
        g = _graph(("A", "B"), ("B", "C"))
        events = []

        NetworkSampler(g, random.Random(1)).estimate(
            250, on_progress=lambda e, d: events.append((e, d["done"])), progress_every=100
        )
        self.assertEqual(events, [("sample", 100), ("sample", 200)])


if __name__ == "__main__":
    unittest.main()
