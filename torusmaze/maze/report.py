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
"""Text rendering of mazes and disjoint-set forests."""

from typing import Iterable

import numpy as np
from torusmaze.common import union_find
from torusmaze.maze import adjacency
from torusmaze.maze import builder


def format_row(report: adjacency.RowReport) -> str:
  """Formats a row as '<count> <idx1> ... <idxk> <w1> ... <wk>'."""
  return ' '.join(
      str(v) for v in (report.count, *report.neighbors, *report.weights))


def format_rows(reports: Iterable[adjacency.RowReport]) -> str:
  return '\n'.join(format_row(r) for r in reports)


def format_row_report(maze: builder.MazeBuilder) -> str:
  return format_rows(maze.row_report())


def format_raw_matrix(maze: builder.MazeBuilder) -> str:
  """One line per row of the upper-triangular weight matrix."""
  # Densified row by row; 4096 rows at most.
  matrix = maze.raw_matrix()
  lines = []
  for i in range(matrix.shape[0]):
    row = matrix[i].toarray().ravel()
    lines.append(' '.join(str(w) for w in row.tolist()))
  return '\n'.join(lines)


def format_sets(sets: union_find.DisjointSet | np.ndarray) -> str:
  """Formats the raw parent/negated-size array of a forest."""
  if isinstance(sets, union_find.DisjointSet):
    sets = sets.as_array()
  return ' '.join(str(v) for v in sets.tolist())


def format_stats(stats: union_find.FindStats) -> str:
  return (
      f'Number of sets remaining = {stats.remaining:4d}\n'
      f'Mean path length in find = {stats.mean_path_length:6.2f}'
  )
