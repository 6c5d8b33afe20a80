import os
import tempfile
import unittest

from city_link import graph_store
from city_link.errors import CityLinkError, MalformedInput

_CHAIN = """3
0 1 0
0 0 1
0 0 0
"""


class LoadTestCase(unittest.TestCase):
    def test_load_chain(self):
        matrix = graph_store.load(_CHAIN)
        self.assertEqual(3, matrix.size)
        self.assertEqual([[0, 1, 0], [0, 0, 1], [0, 0, 0]], matrix.rows())
        self.assertTrue(matrix.has_edge(0, 1))
        self.assertFalse(matrix.has_edge(1, 0))

    def test_any_whitespace_separates_values(self):
        matrix = graph_store.load("2\t1 0\n\n0   1")
        self.assertEqual([[1, 0], [0, 1]], matrix.rows())

    def test_loading_twice_gives_equal_matrices(self):
        self.assertEqual(graph_store.load(_CHAIN), graph_store.load(_CHAIN))

    def test_different_cells_are_not_equal(self):
        self.assertNotEqual(graph_store.load("1 0"), graph_store.load("1 1"))

    def test_values_other_than_zero_and_one_are_kept(self):
        matrix = graph_store.load("2 0 2 -1 0")
        self.assertEqual(2, matrix.cell(0, 1))
        self.assertTrue(matrix.has_edge(1, 0))

    def test_trailing_values_are_ignored(self):
        matrix = graph_store.load("1 1 0 1 1")
        self.assertEqual([[1]], matrix.rows())

    def test_rows_are_copies(self):
        matrix = graph_store.load(_CHAIN)
        rows = matrix.rows()
        rows[0][0] = 1
        self.assertFalse(matrix.has_edge(0, 0))

    def test_truncated_matrix(self):
        with self.assertRaises(MalformedInput):
            graph_store.load("3 0 1 0 0 0")

    def test_missing_city_count(self):
        with self.assertRaises(MalformedInput):
            graph_store.load("   \n")

    def test_non_positive_city_count(self):
        for text in ["0", "-2 1 1 1 1"]:
            with self.subTest(text=text):
                with self.assertRaises(MalformedInput):
                    graph_store.load(text)

    def test_non_integer_value(self):
        with self.assertRaises(MalformedInput):
            graph_store.load("2 1 x 0 1")
        with self.assertRaises(MalformedInput):
            graph_store.load("two 1 0 0 1")

    def test_city_limit(self):
        with self.assertRaises(MalformedInput):
            graph_store.load("3 0 0 0 0 0 0 0 0 0", max_city_count=2)
        self.assertEqual(2, graph_store.load("2 0 0 0 0", max_city_count=2).size)

    def test_malformed_error_is_a_city_link_error(self):
        self.assertTrue(issubclass(MalformedInput, CityLinkError))

    def test_ragged_cells_rejected_by_matrix(self):
        with self.assertRaises(MalformedInput):
            graph_store.Matrix(2, [[0, 1], [0]])


class ReleaseTestCase(unittest.TestCase):
    def test_release_once(self):
        matrix = graph_store.load(_CHAIN)
        graph_store.release(matrix)
        self.assertTrue(matrix.released)
        with self.assertRaises(CityLinkError):
            graph_store.release(matrix)

    def test_released_matrix_cannot_be_read(self):
        matrix = graph_store.load(_CHAIN)
        matrix.release()
        with self.assertRaises(CityLinkError):
            matrix.rows()
        with self.assertRaises(CityLinkError):
            matrix.has_edge(0, 1)

    def test_with_block_releases(self):
        with graph_store.load(_CHAIN) as matrix:
            self.assertFalse(matrix.released)
        self.assertTrue(matrix.released)


class LoadFileTestCase(unittest.TestCase):
    def test_load_file(self):
        with tempfile.TemporaryDirectory() as directory:
            path = os.path.join(directory, "cities.txt")
            with open(path, 'w') as file:
                file.write(_CHAIN)
            with graph_store.load_file(path) as matrix:
                self.assertEqual(graph_store.load(_CHAIN), matrix)

    def test_missing_file(self):
        with tempfile.TemporaryDirectory() as directory:
            with self.assertRaises(OSError):
                graph_store.load_file(os.path.join(directory, "missing.txt"))


if __name__ == '__main__':
    unittest.main()
