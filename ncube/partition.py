"""Capability contracts consumed by spatial-tree builders."""

from __future__ import annotations

from typing import Protocol, Sequence, TypeVar, runtime_checkable

P_contra = TypeVar("P_contra", contravariant=True)


@runtime_checkable
class Partition(Protocol[P_contra]):
    """A region that can test points and route them to a child index.

    ``dispatch`` must agree with the ordering of :meth:`Subdivide.subdivide`:
    for every point the region contains, the child at the dispatched index
    is the one child that contains it.
    """

    def contains(self, point: P_contra) -> bool: ...

    def dispatch(self, point: P_contra) -> int: ...


@runtime_checkable
class Subdivide(Protocol):
    """A region that can split itself into an ordered sequence of children."""

    def subdivide(self) -> Sequence[Subdivide]: ...
