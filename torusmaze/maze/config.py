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
"""Configuration for torus maze construction."""

import dataclasses
from typing import Optional

from torusmaze.common import utils
from torusmaze.maze import torus


@dataclasses.dataclass(frozen=True)
class MazeConfig(utils.NPDataClassJsonMixin):
  """Dataclass configuration for building a torus maze."""

  # Side length of the grid is 2**power. Must be in [1, 6].
  power: int = 2

  # Edge weights are drawn uniformly from [1, max_weight].
  max_weight: int = 2

  # Seed for the random generator. If unset, construction is not
  # reproducible.
  seed: Optional[int] = None

  def validate(self):
    if not torus.MIN_POWER <= self.power <= torus.MAX_POWER:
      raise ValueError(
          f'power must be in [{torus.MIN_POWER}, {torus.MAX_POWER}], '
          f'got {self.power}.')
    if self.max_weight <= 0:
      raise ValueError(f'max_weight must be positive, got {self.max_weight}.')
