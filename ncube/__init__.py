"""N-dimensional hypercube partitioning for spatial trees."""

from ncube.config import GeometryConfig, get_default_config, set_default_config
from ncube.errors import (
    DimensionError,
    InvalidCenterError,
    InvalidWidthError,
    NcubeError,
)
from ncube.geometry.grid import subdivide_cells
from ncube.geometry.hypercubes import contains_points, dispatch_points, find_ncubes
from ncube.geometry.orthants import (
    encode_orthants,
    num_orthants,
    orthant_bits,
    orthant_signs,
)
from ncube.partition import Partition, Subdivide
from ncube.region import Ncube

__version__ = "0.1.0"

__all__ = [
    # Region
    "Ncube",
    # Capabilities
    "Partition",
    "Subdivide",
    # Batched geometry
    "contains_points",
    "dispatch_points",
    "find_ncubes",
    "subdivide_cells",
    # Orthant encoding
    "encode_orthants",
    "num_orthants",
    "orthant_bits",
    "orthant_signs",
    # Errors
    "NcubeError",
    "InvalidWidthError",
    "InvalidCenterError",
    "DimensionError",
    # Configuration
    "GeometryConfig",
    "get_default_config",
    "set_default_config",
]
