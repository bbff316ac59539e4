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
"""Builds random perfect mazes over a toroidal grid.

A maze is a spanning tree of the 4-connected torus grid. Candidate edges are
drawn by picking a random node and a random direction; an edge is accepted
only if it joins two different components of a disjoint-set forest, so the
accepted edges never form a cycle. Construction stops once a single component
remains.

Note that this rejection-sampling scheme does not sample spanning trees
uniformly (unlike e.g. Wilson's algorithm). The expected number of samples
grows faster than linearly with the number of nodes, since the last few
merges need to hit one of very few crossing edges.
"""

from typing import Iterator, Optional

from absl import logging
import networkx as nx
import numpy as np
from scipy import sparse
from torusmaze.common import union_find
from torusmaze.maze import adjacency
from torusmaze.maze import config as config_lib
from torusmaze.maze import torus


class MazeBuilder:
  """Random spanning tree of a 2**power x 2**power torus grid.

  The maze is fully built by the constructor. Afterwards only the embedded
  disjoint-set forest can still be modified, through `union`.
  """

  def __init__(
      self,
      power: int,
      max_weight: int,
      rng: Optional[np.random.RandomState] = None,
  ):
    """Constructor.

    Args:
      power: the grid side length is 2**power; must be in [1, 6].
      max_weight: edge weights are drawn uniformly from [1, max_weight].
      rng: random generator used for sampling edges and weights. A fresh
        unseeded generator is used if not provided.

    Raises:
      ValueError: if power or max_weight are out of range.
    """
    if max_weight <= 0:
      raise ValueError(f'max_weight must be positive, got {max_weight}.')
    self._grid = torus.ToroidalGrid(power)
    self._max_weight = max_weight
    self._rng = rng if rng is not None else np.random.RandomState()
    self._sets = union_find.DisjointSet(self._grid.num_nodes)
    self._adjacency = adjacency.UpperTriangularAdjacency(self._grid.num_nodes)
    self._num_samples = 0
    self._build()

  @classmethod
  def build(
      cls, power: int, max_weight: int, seed: Optional[int] = None
  ) -> 'MazeBuilder':
    """Builds a maze using a generator seeded with `seed`."""
    return cls(power, max_weight, np.random.RandomState(seed))

  @classmethod
  def from_config(cls, config: config_lib.MazeConfig) -> 'MazeBuilder':
    config.validate()
    return cls.build(config.power, config.max_weight, config.seed)

  def _build(self):
    num_nodes = self._grid.num_nodes
    num_directions = len(torus.Direction)
    while self._sets.remaining > 1:
      nodes = self._rng.randint(0, num_nodes, size=num_nodes)
      directions = self._rng.randint(0, num_directions, size=num_nodes)
      for node, direction in zip(nodes.tolist(), directions.tolist()):
        self._num_samples += 1
        neighbor = self._grid.neighbor(node, direction)
        if self._sets.find(node) == self._sets.find(neighbor):
          continue
        self._sets.union(node, neighbor)
        weight = int(self._rng.randint(1, self._max_weight + 1))
        self._adjacency.add_edge(node, neighbor, weight)
        if self._sets.remaining == 1:
          break

    logging.vlog(
        1, 'Built %dx%d torus maze: %d edges from %d samples.',
        self._grid.side, self._grid.side, self._adjacency.num_edges,
        self._num_samples)

  @property
  def grid(self) -> torus.ToroidalGrid:
    return self._grid

  @property
  def power(self) -> int:
    return self._grid.power

  @property
  def max_weight(self) -> int:
    return self._max_weight

  @property
  def num_nodes(self) -> int:
    return self._grid.num_nodes

  @property
  def num_edges(self) -> int:
    return self._adjacency.num_edges

  @property
  def num_samples(self) -> int:
    """Number of (node, direction) samples drawn during construction."""
    return self._num_samples

  # Connectivity queries are answered by the embedded disjoint-set forest.

  @property
  def remaining(self) -> int:
    return self._sets.remaining

  def find(self, node: int) -> int:
    return self._sets.find(node)

  def union(self, a: int, b: int):
    self._sets.union(a, b)

  def connected(self, a: int, b: int) -> bool:
    return self._sets.connected(a, b)

  def stats(self) -> union_find.FindStats:
    return self._sets.stats()

  def sets(self) -> np.ndarray:
    return self._sets.as_array()

  # Reporting.

  def weight(self, a: int, b: int) -> int:
    """Returns the weight of edge (a, b), or 0 if it is not in the maze."""
    return self._adjacency.weight(a, b)

  def edges(self) -> Iterator[tuple[int, int, int]]:
    return self._adjacency.edges()

  def row_report(self) -> list[adjacency.RowReport]:
    """Returns the higher-indexed neighbors of every node, in node order."""
    return list(self._adjacency.rows())

  def raw_matrix(self) -> sparse.csr_matrix:
    """Returns the upper-triangular N x N weight matrix."""
    return self._adjacency.to_sparse()

  def to_graph(self) -> nx.Graph:
    return self._adjacency.to_graph()
