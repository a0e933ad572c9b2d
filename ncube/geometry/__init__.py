from ncube.geometry.hypercubes import contains_points, dispatch_points, find_ncubes
from ncube.geometry.grid import subdivide_cells
from ncube.geometry.orthants import (
    encode_orthants,
    num_orthants,
    orthant_bits,
    orthant_signs,
)

__all__ = [
    "contains_points",
    "dispatch_points",
    "find_ncubes",
    "subdivide_cells",
    "encode_orthants",
    "num_orthants",
    "orthant_bits",
    "orthant_signs",
]
