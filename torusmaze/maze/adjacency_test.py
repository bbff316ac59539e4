# coding=utf-8
# Copyright 2024 The Google Research Authors.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Tests for adjacency."""

from absl.testing import absltest
import networkx as nx
import numpy as np
from torusmaze.maze import adjacency


class UpperTriangularAdjacencyTest(absltest.TestCase):

  def _make(self):
    adj = adjacency.UpperTriangularAdjacency(4)
    adj.add_edge(2, 0, 5)
    adj.add_edge(0, 1, 3)
    adj.add_edge(1, 3, 1)
    return adj

  def test_edges_are_stored_once(self):
    adj = self._make()
    self.assertLen(adj, 4)
    self.assertEqual(adj.num_edges, 3)
    self.assertEqual(list(adj.edges()), [(0, 1, 3), (0, 2, 5), (1, 3, 1)])
    self.assertEqual(adj.weight(2, 0), 5)
    self.assertEqual(adj.weight(0, 2), 5)
    self.assertEqual(adj.weight(2, 3), 0)

    # Overwriting an edge does not add a new one.
    adj.add_edge(1, 0, 7)
    self.assertEqual(adj.num_edges, 3)
    self.assertEqual(adj.weight(0, 1), 7)

  def test_rows(self):
    rows = list(self._make().rows())
    self.assertEqual(rows[0], adjacency.RowReport(0, (1, 2), (3, 5)))
    self.assertEqual(rows[0].count, 2)
    self.assertEqual(rows[1], adjacency.RowReport(1, (3,), (1,)))
    self.assertEqual(rows[2].count, 0)
    self.assertEqual(rows[3].count, 0)

  def test_to_sparse(self):
    matrix = self._make().to_sparse()
    self.assertEqual(matrix.shape, (4, 4))
    np.testing.assert_array_equal(
        matrix.toarray(),
        [[0, 3, 5, 0],
         [0, 0, 0, 1],
         [0, 0, 0, 0],
         [0, 0, 0, 0]])

  def test_to_graph(self):
    g = self._make().to_graph()
    self.assertEqual(g.number_of_nodes(), 4)
    self.assertTrue(
        nx.utils.edges_equal(g.edges(), ((0, 1), (0, 2), (1, 3))))
    self.assertEqual(g.edges[3, 1]['weight'], 1)

  def test_invalid_edges(self):
    adj = adjacency.UpperTriangularAdjacency(4)
    with self.assertRaises(ValueError):
      adj.add_edge(2, 2, 1)
    with self.assertRaises(IndexError):
      adj.add_edge(0, 4, 1)
    with self.assertRaises(IndexError):
      adj.add_edge(-1, 2, 1)


if __name__ == '__main__':
  absltest.main()
