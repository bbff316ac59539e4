# coding=utf-8
# Copyright 2025 The Google Research Authors.
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
"""Helpers for loading serialized dataclasses."""

import functools
import json
import pathlib
import typing
from typing import Any, Callable, TypeVar, Union

from absl import logging
import dataclasses_json

PathLike = Union[str, pathlib.PurePath]

T = TypeVar('T', bound=dataclasses_json.DataClassJsonMixin)

# Local Alias
Path = pathlib.Path


def load_json(path: PathLike) -> Any:
  """Loads a JSON document from a local file."""
  with Path(path).open() as f:
    return json.load(f)


def load_dataclass(
    constructor: type[T], v: Union[str, dict[str, Any], T, None]
) -> Union[T, None]:
  """Load a dataclass from a serialized instance, file path, or dict.

  Args:
    constructor: Dataclass to load
    v: Serialized instance, file path, or dict to create dataclass from.

  Returns:
    New dataclass instance.
  """
  if isinstance(v, constructor):
    return typing.cast(T, v)
  elif v is None:
    return v
  elif isinstance(v, str):
    try:
      # We attempt to parse first since file open ops can be expensive.
      return constructor.from_json(v)
    except json.JSONDecodeError:
      # File path; attempt to load.
      logging.info('Loading %s from %s', constructor.__name__, v)
      return constructor.from_dict(load_json(v))
  else:
    return constructor.from_dict(typing.cast(dict[str, Any], v))


def dataclass_loader(
    constructor: type[T],
) -> Callable[[Union[str, dict[str, Any], T, None]], Union[T, None]]:
  """Create a dataclass instance from a serialized instance, file path, or dict.

  Args:
    constructor: Constructor of class to instantiate.

  Returns:
    A callable decoder that takes a path to file containing serialized
    dataclass, or dict containing all fields of a dataclass and returns an
    instance of that class.
  """
  return functools.partial(load_dataclass, constructor)
