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
"""Topology of a square grid whose edges wrap around (a torus)."""

import enum

MIN_POWER = 1
MAX_POWER = 6


class Direction(enum.IntEnum):
  UP = 0
  DOWN = 1
  LEFT = 2
  RIGHT = 3


class ToroidalGrid:
  """Square grid of side 2**power with 4-connectivity and wraparound.

  Nodes are numbered in row-major order, so node `i` sits at row `i // side`
  and column `i % side`. Every node has exactly four neighbors.
  """

  def __init__(self, power: int):
    if not MIN_POWER <= power <= MAX_POWER:
      raise ValueError(
          f'power must be in [{MIN_POWER}, {MAX_POWER}], got {power}.')
    self._power = power
    self._side = 2**power
    self._num_nodes = self._side * self._side

  @property
  def power(self) -> int:
    return self._power

  @property
  def side(self) -> int:
    return self._side

  @property
  def num_nodes(self) -> int:
    return self._num_nodes

  def _check_node(self, i: int):
    if not 0 <= i < self._num_nodes:
      raise IndexError(
          f'Node {i} out of range for {self._num_nodes} nodes.')

  def row(self, i: int) -> int:
    self._check_node(i)
    return i // self._side

  def col(self, i: int) -> int:
    self._check_node(i)
    return i % self._side

  def index(self, row: int, col: int) -> int:
    if not (0 <= row < self._side and 0 <= col < self._side):
      raise IndexError(f'({row}, {col}) outside {self._side}x{self._side}.')
    return row * self._side + col

  def right(self, i: int) -> int:
    self._check_node(i)
    if (i + 1) % self._side == 0:
      return i - (self._side - 1)
    return i + 1

  def left(self, i: int) -> int:
    self._check_node(i)
    if i % self._side == 0:
      return i + (self._side - 1)
    return i - 1

  def below(self, i: int) -> int:
    self._check_node(i)
    if i + self._side > self._num_nodes - 1:
      return i - (self._num_nodes - self._side)
    return i + self._side

  def above(self, i: int) -> int:
    self._check_node(i)
    if i - self._side < 0:
      return i + (self._num_nodes - self._side)
    return i - self._side

  def neighbor(self, i: int, direction: Direction) -> int:
    """Returns the neighbor of `i` one step in `direction`."""
    direction = Direction(direction)
    if direction == Direction.UP:
      return self.above(i)
    elif direction == Direction.DOWN:
      return self.below(i)
    elif direction == Direction.LEFT:
      return self.left(i)
    return self.right(i)

  def neighbors(self, i: int) -> tuple[int, int, int, int]:
    """Returns the neighbors of `i` in `Direction` order."""
    return tuple(self.neighbor(i, d) for d in Direction)
