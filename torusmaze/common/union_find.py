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
"""Implements the disjoint-set forest/union-find data structure."""

import dataclasses

import numpy as np
from torusmaze.common import utils


@dataclasses.dataclass(frozen=True)
class FindStats(utils.NPDataClassJsonMixin):
  """Snapshot of the live set count and path-length totals of `find`."""

  remaining: int
  find_calls: int
  total_path_length: int

  @property
  def mean_path_length(self) -> float:
    if not self.find_calls:
      return 0.0
    return self.total_path_length / self.find_calls


class DisjointSet:
  """Array-based implementation of the disjoint-set forest data structure.

  Uses union-by-size and path compression over the integers [0, n). Each
  entry of the backing array is either a parent pointer (non-negative) or,
  for a root, the negated size of its tree.

  When two trees of equal size are merged, the root of the second argument is
  attached under the root of the first.

  More info: http://en.wikipedia.org/wiki/Disjoint-set_data_structure
  """

  def __init__(self, n: int):
    if n <= 0:
      raise ValueError(f'Number of elements must be positive, got {n}.')
    self._sets = [-1] * n
    self._remaining = n
    self._find_calls = 0
    self._total_path_length = 0

  @classmethod
  def make(cls, n: int) -> 'DisjointSet':
    """Creates `n` singleton sets."""
    return cls(n)

  def __len__(self) -> int:
    return len(self._sets)

  @property
  def remaining(self) -> int:
    """Number of disjoint sets currently in the forest."""
    return self._remaining

  def _check_index(self, a: int):
    if not 0 <= a < len(self._sets):
      raise IndexError(
          f'Element {a} out of range for {len(self._sets)} elements.')

  def find(self, a: int) -> int:
    """Finds the representative of 'a'.

    Every element visited on the way to the root is re-pointed directly at
    the root.

    Args:
      a: element to find a representative for

    Returns:
      representative of 'a'

    Raises:
      IndexError: if 'a' is not in [0, n).
    """
    self._check_index(a)
    sets = self._sets

    # Find representative.
    path_length = 1
    root = a
    while sets[root] >= 0:
      root = sets[root]
      path_length += 1

    # Compress path.
    node = a
    while node != root:
      parent = sets[node]
      sets[node] = root
      node = parent

    self._find_calls += 1
    self._total_path_length += path_length
    return root

  def union(self, a: int, b: int):
    """Merge 'a' and 'b' into a single set."""
    self._check_index(a)
    self._check_index(b)
    if a == b:
      return

    root_a = self.find(a)
    root_b = self.find(b)
    if root_a == root_b:
      return

    if self._size_of_root(root_b) <= self._size_of_root(root_a):
      self._graft(root_b, root_a)
    else:
      self._graft(root_a, root_b)

  def _size_of_root(self, root: int) -> int:
    return -self._sets[root]

  def _graft(self, child: int, parent: int):
    self._sets[parent] += self._sets[child]
    self._sets[child] = parent
    self._remaining -= 1

  def connected(self, a: int, b: int) -> bool:
    """Returns whether 'a' and 'b' belong to the same set."""
    return self.find(a) == self.find(b)

  def size(self, a: int) -> int:
    """Returns the number of elements in the set containing 'a'."""
    return self._size_of_root(self.find(a))

  def is_singleton(self, a: int) -> bool:
    """Returns whether set 'a' only contains a single element."""
    return self.size(a) == 1

  def stats(self) -> FindStats:
    return FindStats(
        remaining=self._remaining,
        find_calls=self._find_calls,
        total_path_length=self._total_path_length,
    )

  def as_array(self) -> np.ndarray:
    """Returns a copy of the raw parent/negated-size array."""
    return np.array(self._sets, dtype=np.int64)
