"""Little-endian orthant encoding shared by dispatch and subdivision.

Orthant ``n`` of a ``d``-dimensional cell is the child lying in the upper
half along axis ``i`` exactly when bit ``i`` of ``n`` is set::

    n = sum(bit_i << i for i in range(d))

Both :func:`~ncube.geometry.hypercubes.dispatch_points` and
:func:`~ncube.geometry.grid.subdivide_cells` go through this module, so the
index a point is dispatched to is always the position of its child in the
subdivision output.
"""

from __future__ import annotations

import torch

from ncube.errors import DimensionError

# Orthant indices are int64; bit 63 is the sign bit.
MAX_DIM = 62


def _check_dim(dim: int) -> None:
    if not 1 <= dim <= MAX_DIM:
        raise DimensionError(f"dimension must be in [1, {MAX_DIM}], got {dim}")


def num_orthants(dim: int) -> int:
    """Number of children of a ``dim``-dimensional cell, ``2**dim``."""
    _check_dim(dim)
    return 1 << dim


def _axis_weights(dim: int, device: torch.device | None = None) -> torch.Tensor:
    """``(dim,)`` int64 tensor ``[1, 2, 4, ...]``."""
    return torch.ones(dim, dtype=torch.long, device=device) << torch.arange(
        dim, device=device
    )


def encode_orthants(bits: torch.Tensor) -> torch.Tensor:
    """Pack per-axis upper-half flags into orthant indices.

    Args:
        bits: ``(..., d)`` boolean (or 0/1 integer) tensor.

    Returns:
        ``(...)`` int64 tensor of orthant indices.
    """
    dim = bits.shape[-1]
    _check_dim(dim)
    weights = _axis_weights(dim, bits.device)
    return (bits.long() * weights).sum(dim=-1)


def orthant_bits(index: torch.Tensor | int, dim: int) -> torch.Tensor:
    """Unpack orthant indices into per-axis upper-half flags.

    Args:
        index: Integer tensor of any shape, or a plain ``int``.
        dim: Number of axes.

    Returns:
        ``(..., dim)`` boolean tensor; entry ``i`` is ``(index >> i) & 1``.
    """
    _check_dim(dim)
    index = torch.as_tensor(index, dtype=torch.long)
    shifts = torch.arange(dim, device=index.device)
    return ((index.unsqueeze(-1) >> shifts) & 1).bool()


def orthant_signs(
    dim: int,
    *,
    dtype: torch.dtype = torch.float32,
    device: torch.device | None = None,
) -> torch.Tensor:
    """``(2**dim, dim)`` table of ``-1`` / ``+1`` offsets in orthant order.

    Row ``n`` holds the direction in which child ``n``'s centre is shifted
    from its parent's centre.
    """
    indices = torch.arange(num_orthants(dim), device=device)
    bits = orthant_bits(indices, dim)
    return bits.to(dtype) * 2 - 1
