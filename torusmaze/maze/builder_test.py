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
"""Tests for builder."""

from absl.testing import absltest
from absl.testing import parameterized
import networkx as nx
import numpy as np
from torusmaze.maze import builder
from torusmaze.maze import config as config_lib


class MazeBuilderTest(parameterized.TestCase):

  @parameterized.parameters(
      (7, 2), (0, 2), (-1, 2), (2, 0), (2, -3))
  def test_invalid_arguments(self, power, max_weight):
    with self.assertRaises(ValueError):
      builder.MazeBuilder.build(power, max_weight)

  @parameterized.parameters(
      (1, 1), (2, 2), (3, 10), (4, 3), (5, 100), (6, 7))
  def test_spanning_tree(self, power, max_weight):
    maze = builder.MazeBuilder.build(power, max_weight, seed=power)
    num_nodes = 2**(2 * power)
    self.assertEqual(maze.num_nodes, num_nodes)
    self.assertEqual(maze.remaining, 1)
    self.assertEqual(maze.num_edges, num_nodes - 1)
    self.assertGreaterEqual(maze.num_samples, num_nodes - 1)

    edges = list(maze.edges())
    self.assertLen(edges, num_nodes - 1)
    for u, v, w in edges:
      self.assertLess(u, v)
      self.assertBetween(w, 1, max_weight)
      # Only grid neighbors are ever joined.
      self.assertIn(v, maze.grid.neighbors(u))

    self.assertTrue(nx.is_tree(maze.to_graph()))

  def test_all_nodes_share_one_root(self):
    maze = builder.MazeBuilder.build(3, 4, seed=0)
    root = maze.find(0)
    for i in range(maze.num_nodes):
      self.assertEqual(maze.find(i), root)
      self.assertTrue(maze.connected(0, i))

  def test_seeded_builds_are_reproducible(self):
    a = builder.MazeBuilder.build(4, 9, seed=42)
    b = builder.MazeBuilder.build(4, 9, seed=42)
    self.assertEqual(list(a.edges()), list(b.edges()))
    self.assertEqual(a.num_samples, b.num_samples)

  def test_explicit_rng(self):
    a = builder.MazeBuilder(3, 5, np.random.RandomState(7))
    b = builder.MazeBuilder.build(3, 5, seed=7)
    self.assertEqual(list(a.edges()), list(b.edges()))

  def test_row_report(self):
    maze = builder.MazeBuilder.build(2, 2, seed=3)
    rows = maze.row_report()
    self.assertLen(rows, 16)
    self.assertEqual([r.row for r in rows], list(range(16)))
    self.assertEqual(sum(r.count for r in rows), 15)
    for r in rows:
      self.assertEqual(list(r.neighbors), sorted(r.neighbors))
      for v, w in zip(r.neighbors, r.weights):
        self.assertGreater(v, r.row)
        self.assertEqual(maze.weight(r.row, v), w)
    # The last node has no higher-indexed neighbor.
    self.assertEqual(rows[-1].count, 0)

  def test_raw_matrix(self):
    maze = builder.MazeBuilder.build(3, 6, seed=11)
    matrix = maze.raw_matrix()
    self.assertEqual(matrix.shape, (64, 64))
    self.assertEqual(matrix.nnz, 63)
    dense = matrix.toarray()
    np.testing.assert_array_equal(np.tril(dense), 0)
    for u, v, w in maze.edges():
      self.assertEqual(dense[u, v], w)

  def test_delegated_union(self):
    maze = builder.MazeBuilder.build(1, 1, seed=0)
    self.assertEqual(maze.remaining, 1)
    maze.union(0, 3)
    self.assertEqual(maze.remaining, 1)
    with self.assertRaises(IndexError):
      maze.find(4)
    with self.assertRaises(IndexError):
      maze.union(0, 4)

  def test_stats(self):
    maze = builder.MazeBuilder.build(2, 2, seed=5)
    stats = maze.stats()
    self.assertEqual(stats.remaining, 1)
    self.assertGreater(stats.find_calls, 0)
    self.assertGreaterEqual(stats.mean_path_length, 1.0)
    sets = maze.sets()
    self.assertEqual(np.count_nonzero(sets < 0), 1)
    self.assertEqual(sets.min(), -16)

  def test_from_config(self):
    config = config_lib.MazeConfig(power=2, max_weight=3, seed=1)
    maze = builder.MazeBuilder.from_config(config)
    self.assertEqual(maze.power, 2)
    self.assertEqual(maze.max_weight, 3)
    self.assertEqual(
        list(maze.edges()), list(builder.MazeBuilder.build(2, 3, 1).edges()))

    with self.assertRaises(ValueError):
      builder.MazeBuilder.from_config(config_lib.MazeConfig(power=7))


if __name__ == '__main__':
  absltest.main()
