"""The N-cube region value type."""

from __future__ import annotations

from typing import Any, Sequence, Union

import torch

from ncube.config import get_default_config
from ncube.errors import DimensionError, InvalidCenterError, InvalidWidthError
from ncube.geometry.grid import subdivide_cells
from ncube.geometry.hypercubes import contains_points, dispatch_points

PointLike = Union[torch.Tensor, Sequence[float]]


def _as_center(
    center: PointLike,
    dtype: torch.dtype | None,
    device: torch.device | str | None,
) -> torch.Tensor:
    if isinstance(center, torch.Tensor):
        if not torch.is_floating_point(center):
            raise TypeError(f"center must be floating point, got dtype {center.dtype}")
        t = center.detach().to(
            dtype=dtype or center.dtype, device=device or center.device
        )
    else:
        config = get_default_config()
        t = torch.as_tensor(
            center, dtype=dtype or config.dtype, device=device or config.device
        )
    if dtype is not None and not t.dtype.is_floating_point:
        raise TypeError(f"dtype must be floating point, got {t.dtype}")
    if t.dim() != 1 or t.shape[0] == 0:
        raise DimensionError(
            f"center must be a non-empty 1-D point, got shape {tuple(t.shape)}"
        )
    return t.clone()


class Ncube:
    """An axis-aligned hypercube given by its centre and edge width.

    The region covers ``(c_i - w/2, c_i + w/2]`` on every axis ``i``: open
    at the minimum, closed at the maximum.  Instances are immutable; every
    operation returns fresh tensors or fresh regions.

    Args:
        center: Centre point, a 1-D floating tensor or a sequence of numbers.
            Its length is the dimensionality ``D``.
        width: Edge length, strictly positive.
        dtype: Optional dtype override.  Tensors keep their own dtype and
            plain sequences use the configured default.
        device: Optional device override, resolved the same way as ``dtype``.

    Raises:
        InvalidWidthError: If ``width`` is not finite and strictly positive
            in the region's dtype.
        InvalidCenterError: If ``center`` has NaN or infinite coordinates.
        DimensionError: If ``center`` is not a non-empty 1-D point.
        TypeError: If ``center`` is an integer tensor.
    """

    __slots__ = ("_center", "_width")

    def __init__(
        self,
        center: PointLike,
        width: float | torch.Tensor,
        *,
        dtype: torch.dtype | None = None,
        device: torch.device | str | None = None,
    ) -> None:
        c = _as_center(center, dtype, device)
        if isinstance(width, torch.Tensor):
            width = width.detach()
        w = torch.as_tensor(width, dtype=c.dtype, device=c.device).clone()
        if w.dim() != 0:
            raise DimensionError(f"width must be a scalar, got shape {tuple(w.shape)}")
        # NaN fails both checks
        if not (bool(w > 0) and bool(torch.isfinite(w))):
            raise InvalidWidthError(w.item())
        if not bool(torch.isfinite(c).all()):
            raise InvalidCenterError(f"center must be finite, got {c.tolist()}")
        object.__setattr__(self, "_center", c)
        object.__setattr__(self, "_width", w)

    @classmethod
    def new(cls, center: PointLike, width: float | torch.Tensor) -> Ncube:
        """Validating constructor, equivalent to ``Ncube(center, width)``."""
        return cls(center, width)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self._center, self._width))

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def center(self) -> torch.Tensor:
        """A copy of the centre, shape ``(D,)``."""
        return self._center.clone()

    @property
    def width(self) -> torch.Tensor:
        """A copy of the edge width as a 0-d tensor."""
        return self._width.clone()

    @property
    def dim(self) -> int:
        return self._center.shape[0]

    @property
    def dtype(self) -> torch.dtype:
        return self._center.dtype

    @property
    def device(self) -> torch.device:
        return self._center.device

    def bounds(self) -> tuple[torch.Tensor, torch.Tensor]:
        """Return the ``(lower, upper)`` corners; ``lower`` is excluded."""
        h = self._width / 2
        return self._center - h, self._center + h

    def to(
        self,
        dtype: torch.dtype | None = None,
        device: torch.device | str | None = None,
    ) -> Ncube:
        """Return a copy converted to ``dtype`` and/or ``device``."""
        return type(self)(self._center, self._width, dtype=dtype, device=device)

    # ------------------------------------------------------------------
    # Partition / subdivide
    # ------------------------------------------------------------------

    def _operands(
        self, point: PointLike
    ) -> tuple[torch.Tensor, torch.Tensor, torch.Tensor]:
        """Return ``(point, center, width)`` in a common dtype.

        Floating tensors wider than the region are compared at their own
        precision; everything else is converted to the region's dtype.
        """
        dtype = self.dtype
        if isinstance(point, torch.Tensor) and point.is_floating_point():
            dtype = torch.promote_types(point.dtype, dtype)
        p = torch.as_tensor(point, dtype=dtype, device=self.device)
        if p.shape != self._center.shape:
            raise DimensionError(
                f"point must have shape {tuple(self._center.shape)}, "
                f"got {tuple(p.shape)}"
            )
        return p, self._center.to(dtype), self._width.to(dtype)

    def contains(self, point: PointLike) -> bool:
        """Whether ``point`` lies in ``(c - w/2, c + w/2]`` on every axis."""
        p, c, w = self._operands(point)
        mask = contains_points(p[None], c[None], w[None])
        return bool(mask[0, 0])

    def dispatch(self, point: PointLike) -> int:
        """Index of the child of :meth:`subdivide` that would hold ``point``.

        Bit ``i`` of the index is set when ``point`` lies strictly above the
        centre on axis ``i``.  The point need not be inside this region.
        """
        p, c, _ = self._operands(point)
        return int(dispatch_points(p[None], c)[0])

    def subdivide(self) -> list[Ncube]:
        """Split into ``2**D`` children of half the width, in dispatch order.

        Children tile the parent exactly when centre and width are dyadic
        (multiples of a power of two representable in the dtype).  Otherwise
        the child faces are rounded independently of the parent's centre
        planes, so points on those planes can be contained in several
        children at once; the parent's own centre is often claimed by all
        ``2**D`` of them.

        Raises:
            InvalidWidthError: If halving underflows the width to zero.
            InvalidCenterError: If a child centre overflows the dtype.
        """
        centers, widths = subdivide_cells(self._center[None], self._width[None])
        return [type(self)(c, w) for c, w in zip(centers, widths)]

    # ------------------------------------------------------------------
    # Value semantics
    # ------------------------------------------------------------------

    def _key(self) -> tuple[tuple[float, ...], float]:
        return tuple(self._center.tolist()), self._width.item()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ncube):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return f"{type(self).__name__}(center={self._center.tolist()}, width={self._width.item()})"
