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
r"""Build a random torus maze and print it.

Example usage:

  python3 torusmaze/build_maze.py --power 3 --max_weight 5 --seed 1

  python3 torusmaze/build_maze.py \
      --maze_config path/to/maze.json --report raw
"""

from typing import Optional, Sequence

from absl import app
from absl import flags
from absl import logging

from torusmaze.common import file
from torusmaze.common import utils
from torusmaze.maze import builder
from torusmaze.maze import config as config_lib
from torusmaze.maze import report

_MAZE_CONFIG = flags.DEFINE_string(
    'maze_config', None,
    'JSON MazeConfig, or path to serialized config. Explicitly set '
    '--power, --max_weight and --seed override its values.')
_POWER = flags.DEFINE_integer(
    'power', None, 'Grid side length is 2**power; in [1, 6].')
_MAX_WEIGHT = flags.DEFINE_integer(
    'max_weight', None, 'Edge weights are drawn from [1, max_weight].')
_SEED = flags.DEFINE_integer('seed', None, 'Random seed.')
_REPORT = flags.DEFINE_enum(
    'report', 'rows', ['rows', 'raw', 'stats'],
    'Which report to print: per-row neighbors, the raw upper-triangular '
    'weight matrix, or disjoint-set statistics.')


def resolve_config(
    maze_config: Optional[str],
    power: Optional[int] = None,
    max_weight: Optional[int] = None,
    seed: Optional[int] = None,
) -> config_lib.MazeConfig:
  """Combines a serialized MazeConfig with any explicitly set values."""
  config = file.load_dataclass(config_lib.MazeConfig, maze_config)
  if config is None:
    config = config_lib.MazeConfig()
  overrides = {
      'power': power,
      'max_weight': max_weight,
      'seed': seed,
  }
  return utils.update_dataclass(
      config, {k: v for k, v in overrides.items() if v is not None})


def render(maze: builder.MazeBuilder, kind: str) -> str:
  if kind == 'rows':
    return report.format_row_report(maze)
  elif kind == 'raw':
    return report.format_raw_matrix(maze)
  elif kind == 'stats':
    return report.format_stats(maze.stats())
  raise ValueError(f'Unknown report: {kind}')


def main(argv: Sequence[str]) -> None:
  if len(argv) > 1:
    raise app.UsageError('Too many command-line arguments.')

  config = resolve_config(
      _MAZE_CONFIG.value, _POWER.value, _MAX_WEIGHT.value, _SEED.value)
  logging.info('Building maze with config: %s', config.to_json())
  with utils.report_time('build_maze'):
    maze = builder.MazeBuilder.from_config(config)
  print(render(maze, _REPORT.value))


def run():
  app.run(main)


if __name__ == '__main__':
  run()
