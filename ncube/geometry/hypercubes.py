"""Batched point-in-N-cube containment, lookup and dispatch."""

from __future__ import annotations

import torch

from ncube.errors import DimensionError
from ncube.geometry.orthants import encode_orthants


def _check_rows(t: torch.Tensor, name: str, d: int | None = None) -> None:
    if t.dim() != 2:
        raise DimensionError(f"{name} must have shape (n, D), got {tuple(t.shape)}")
    if d is not None and t.shape[1] != d:
        raise DimensionError(
            f"{name} must have {d} coordinates per row, got {t.shape[1]}"
        )


def contains_points(
    points: torch.Tensor,
    centers: torch.Tensor,
    widths: torch.Tensor,
) -> torch.Tensor:
    """Test every point against every N-cube.

    Each axis interval is open at its minimum and closed at its maximum,
    ``(c_i - w/2, c_i + w/2]``, so cells sharing a face never both claim a
    point on it.  The test is evaluated as ``-w <= 2 (c_i - p_i) < w``.

    Args:
        points: ``(k, D)`` tensor of query points.
        centers: ``(m, D)`` tensor of N-cube centres.
        widths: ``(m,)`` tensor of edge lengths.

    Returns:
        ``(k, m)`` boolean tensor, ``True`` where point ``i`` lies in cube ``j``.
    """
    _check_rows(centers, "centers")
    _check_rows(points, "points", centers.shape[1])
    if widths.shape != (centers.shape[0],):
        raise DimensionError(
            f"widths must have shape ({centers.shape[0]},), got {tuple(widths.shape)}"
        )

    # (k, 1, D) vs (1, m, D)
    off = (centers[None, :, :] - points[:, None, :]) * 2
    w = widths[None, :, None]

    inside = (-w <= off) & (off < w)
    return inside.all(dim=-1)


def find_ncubes(
    points: torch.Tensor,
    centers: torch.Tensor,
    widths: torch.Tensor,
) -> torch.Tensor:
    """Find which N-cube (if any) each point belongs to.

    Args:
        points: ``(k, D)`` tensor of query points.
        centers: ``(m, D)`` tensor of N-cube centres.
        widths: ``(m,)`` tensor of edge lengths.

    Returns:
        ``(k,)`` integer tensor of cube indices, or ``-1`` if a point is not
        contained in any cube.  When cubes overlap the lowest index wins, so
        for the children of one parent the owner of a shared face is the
        cube whose closed upper bound lies on it.
    """
    contained = contains_points(points, centers, widths)  # (k, m)
    k, m = contained.shape
    if m == 0:
        return torch.full((k,), -1, dtype=torch.long, device=points.device)
    # Rank owners by position; non-owners get the sentinel m
    ranks = torch.arange(m, device=contained.device).expand(k, m)
    first = ranks.masked_fill(~contained, m).amin(dim=1)
    return first.masked_fill(first == m, -1)


def dispatch_points(points: torch.Tensor, centers: torch.Tensor) -> torch.Tensor:
    """Orthant index of the child each point would fall into.

    Bit ``i`` of the result is set when the point lies in the upper half of
    axis ``i``, i.e. ``p_i > c_i``.  A point exactly on a centre hyperplane
    goes to the lower half, matching :func:`contains_points` for the
    children produced by :func:`~ncube.geometry.grid.subdivide_cells`.
    Points need not lie inside the cell.

    Args:
        points: ``(k, D)`` query points.
        centers: ``(k, D)`` per-point cell centres, or ``(D,)`` for a single
            cell shared by every point.

    Returns:
        ``(k,)`` int64 tensor with values in ``[0, 2**D)``.
    """
    _check_rows(points, "points")
    d = points.shape[1]
    if centers.dim() == 1:
        if centers.shape[0] != d:
            raise DimensionError(
                f"centers must have {d} coordinates, got {centers.shape[0]}"
            )
        centers = centers.unsqueeze(0)
    elif centers.shape != points.shape:
        raise DimensionError(
            f"centers must have shape ({d},) or {tuple(points.shape)}, "
            f"got {tuple(centers.shape)}"
        )
    return encode_orthants(points > centers)
