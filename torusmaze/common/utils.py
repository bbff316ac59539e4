# coding=utf-8
# Copyright 2022 The Google Research Authors.
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
"""Various utility functions."""

import contextlib
import dataclasses
import time
from typing import Any, Protocol, TypeVar

from absl import logging
import dataclasses_json


def _handle_np(o):
  if hasattr(o, 'item'):
    return o.item()
  raise TypeError


class NPDataClassJsonMixin(dataclasses_json.DataClassJsonMixin):
  """Dataclass mixin that supports Numpy scalar types e.g. np.int64.

  Counters and seeds are occasionally produced by numpy and end up wrapped in
  a numpy type, which the built-in JSON encoder cannot serialize. This shim
  converts them to the underlying python type before deferring to the
  original encoder.
  """

  def to_json(self, *args, **kw) -> str:
    return super().to_json(*args, default=_handle_np, **kw)


@contextlib.contextmanager
def report_time(name):
  start = time.time()
  try:
    yield
  finally:
    duration = time.time() - start
    logging.info('time[%s] = %.6f', name, duration)


# This is a kludge, since dataclasses do not export their typeshed for dataclass
# externally.
class IsDataclass(Protocol):
  __dataclass_fields__: dict[str, Any]


D = TypeVar('D', bound=IsDataclass)


def update_dataclass(
    source: D,
    overrides: dict[str, Any],
    apply_recursive: bool = True,
) -> D:
  """Recursively updates a dataclass with overrides.

  Contrary to dataclasses.replace, this function will only update attributes
  that are present in the source dataclass, and will apply recursively to
  sub-dataclasses.

  Args:
    source: The dataclass to update.
    overrides: A mapping of attribute name to value to override.
    apply_recursive: Whether to apply the overrides recursively to
      sub-dataclasses or not.

  Returns:
    A new dataclass with the overrides applied.
  """
  params = {}
  for k, v in overrides.items():
    if not hasattr(source, k):
      raise ValueError(f'Attribute {k} not found in {source}')
    attr = getattr(source, k)
    if dataclasses.is_dataclass(attr) and apply_recursive:
      params[k] = update_dataclass(attr, v)
    else:
      params[k] = v

  return dataclasses.replace(source, **params)
