"""Quadtree descent example.

Starting from a square region, repeatedly subdivides and follows the child
that dispatch selects for a query point, printing each visited cell.
"""

import torch
import ncube


def main() -> None:
    region = ncube.Ncube(torch.tensor([0.0, 0.0]), 16.0)
    point = torch.tensor([3.0, -5.0])

    depth = 0
    while region.contains(point) and region.width.item() > 1.0:
        index = region.dispatch(point)
        print(f"depth {depth}: {region} -> child {index}")
        region = region.subdivide()[index]
        depth += 1

    print(f"Leaf cell: {region}")

    # Same query against all leaves of a uniform 3-level grid at once
    centers = region.center.new_zeros(1, 2)
    widths = torch.tensor([16.0])
    for _ in range(3):
        centers, widths = ncube.subdivide_cells(centers, widths)
    leaf = ncube.find_ncubes(point[None], centers, widths)
    print(f"Grid cell {leaf.item()} of {centers.shape[0]}: centre {centers[leaf].tolist()}")


if __name__ == "__main__":
    main()
