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
"""Sparse weighted adjacency storage for undirected graphs."""

from typing import Iterator, NamedTuple

import networkx as nx
import numpy as np
from scipy import sparse


class RowReport(NamedTuple):
  """Higher-indexed neighbors of a single node and their edge weights."""

  row: int
  neighbors: tuple[int, ...]
  weights: tuple[int, ...]

  @property
  def count(self) -> int:
    return len(self.neighbors)


class UpperTriangularAdjacency:
  """Stores each undirected edge once, in the row of its smaller endpoint.

  Only the upper triangle (u < v) of the weight matrix is kept; the lower
  half is implied by symmetry.
  """

  def __init__(self, num_nodes: int):
    self._rows: list[dict[int, int]] = [{} for _ in range(num_nodes)]
    self._num_edges = 0

  def __len__(self) -> int:
    return len(self._rows)

  @property
  def num_edges(self) -> int:
    return self._num_edges

  def add_edge(self, a: int, b: int, weight: int):
    """Records the undirected edge (a, b) with the given weight."""
    if a == b:
      raise ValueError(f'Self-loop on node {a} is not allowed.')
    u, v = min(a, b), max(a, b)
    if u < 0 or v >= len(self._rows):
      raise IndexError(f'Edge ({a}, {b}) out of range for {len(self)} nodes.')
    row = self._rows[u]
    if v not in row:
      self._num_edges += 1
    row[v] = weight

  def weight(self, a: int, b: int) -> int:
    """Returns the weight of edge (a, b), or 0 if absent."""
    u, v = min(a, b), max(a, b)
    return self._rows[u].get(v, 0)

  def row(self, u: int) -> RowReport:
    neighbors = tuple(sorted(self._rows[u]))
    return RowReport(
        row=u,
        neighbors=neighbors,
        weights=tuple(self._rows[u][v] for v in neighbors),
    )

  def rows(self) -> Iterator[RowReport]:
    for u in range(len(self._rows)):
      yield self.row(u)

  def edges(self) -> Iterator[tuple[int, int, int]]:
    """Yields (u, v, weight) with u < v in ascending order."""
    for report in self.rows():
      for v, w in zip(report.neighbors, report.weights):
        yield report.row, v, w

  def to_sparse(self) -> sparse.csr_matrix:
    """Returns the upper-triangular weight matrix."""
    n = len(self._rows)
    us, vs, ws = [], [], []
    for u, v, w in self.edges():
      us.append(u)
      vs.append(v)
      ws.append(w)
    return sparse.csr_matrix(
        (np.array(ws, dtype=np.int64), (np.array(us, dtype=np.int64),
                                        np.array(vs, dtype=np.int64))),
        shape=(n, n),
    )

  def to_graph(self) -> nx.Graph:
    g = nx.Graph()
    g.add_nodes_from(range(len(self._rows)))
    g.add_weighted_edges_from(self.edges())
    return g
