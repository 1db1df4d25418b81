# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""Type hints used internally by this package"""

from __future__ import annotations

from typing import (
    Dict, List, Optional, Union, Any, Tuple, Type, Set, Callable, Awaitable,
    Iterable, Mapping, AsyncContextManager, AsyncIterator, TypeVar, TYPE_CHECKING, cast,
  )

from types import TracebackType

from typing_extensions import Self

JsonableDict = Dict[str, 'Jsonable']
"""A dictionary that can be serialized to JSON"""

Jsonable = Union[JsonableDict, List['Jsonable'], str, int, float, bool, None]
"""A value that can be serialized to JSON"""
