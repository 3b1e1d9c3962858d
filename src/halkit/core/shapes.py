# topmark:header:start
#
#   project      : HalKit
#   file         : shapes.py
#   file_relpath : src/halkit/core/shapes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Single-vs-many projection of relation values.

HAL lets a relation hold either a bare object or an array of objects. HalKit
always stores relation members as ordered lists and only decides the wire shape
when flattening:

- `One`: exactly one member; rendered as the bare value.
- `Many`: any other count; rendered as a list in registration order.

`project` picks the variant, `render` produces the plain value for the output
mapping.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class One(Generic[T]):
    """A relation with exactly one member."""

    item: T

    def render(self, fn: Callable[[T], object]) -> object:
        """Return ``fn(item)``."""
        return fn(self.item)


@dataclass(frozen=True, slots=True)
class Many(Generic[T]):
    """A relation with zero or several members, in registration order."""

    items: tuple[T, ...]

    def render(self, fn: Callable[[T], object]) -> object:
        """Return ``[fn(item) for item in items]``."""
        return [fn(item) for item in self.items]


def project(items: Sequence[T]) -> One[T] | Many[T]:
    """Project stored relation members onto their wire shape.

    Args:
        items (Sequence[T]): Members in registration order.

    Returns:
        One[T] | Many[T]: `One` for a single member, `Many` otherwise.
    """
    if len(items) == 1:
        return One(items[0])
    return Many(tuple(items))
