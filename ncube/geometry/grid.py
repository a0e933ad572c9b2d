"""Dimension-agnostic subdivision of N-cubes into their 2^D children."""

from __future__ import annotations

import logging

import torch

from ncube.errors import DimensionError
from ncube.geometry.orthants import orthant_signs

logger = logging.getLogger(__name__)


def subdivide_cells(
    centers: torch.Tensor,
    widths: torch.Tensor,
) -> tuple[torch.Tensor, torch.Tensor]:
    """Subdivide cells into ``2^D`` equal sub-cells each.

    The children of parent ``j`` occupy rows ``j * 2^D`` to
    ``(j + 1) * 2^D - 1`` of the output, in orthant order: child ``n`` is
    shifted by ``+w/4`` along axis ``i`` when bit ``i`` of ``n`` is set and
    by ``-w/4`` otherwise.

    Args:
        centers: ``(N, D)`` centres of cells to subdivide.
        widths: ``(N,)`` edge lengths of cells to subdivide.

    Returns:
        ``(new_centers, new_widths)``: ``(N * 2^D, D)`` and ``(N * 2^D,)``.
    """
    if centers.dim() != 2:
        raise DimensionError(f"centers must have shape (N, D), got {tuple(centers.shape)}")
    n, d = centers.shape
    if widths.shape != (n,):
        raise DimensionError(f"widths must have shape ({n},), got {tuple(widths.shape)}")

    # signs: (2^D, D), +/-1 per axis in orthant order
    signs = orthant_signs(d, dtype=centers.dtype, device=centers.device)
    n_sub = signs.shape[0]

    new_widths = widths / 2
    # Quarter-width offsets: (N, 1, 1) for broadcasting
    dx = (new_widths / 2)[:, None, None]
    new_centers = (centers.unsqueeze(1) + signs.unsqueeze(0) * dx).reshape(-1, d)

    logger.debug("Subdivided %d cells of dimension %d into %d children", n, d, n * n_sub)

    return new_centers, new_widths.repeat_interleave(n_sub)
