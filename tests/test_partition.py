"""Tests for the capability contracts and the partition-law checks."""

import torch
import pytest

from ncube.partition import Partition, Subdivide
from ncube.region import Ncube
from ncube.testing import check_containment_law, check_partition_laws


class _Interval:
    """A 1-D region that routes every point to child 0 (broken on purpose)."""

    def contains(self, point: float) -> bool:
        return True

    def dispatch(self, point: float) -> int:
        return 0

    def subdivide(self) -> list["_Interval"]:
        return [_Interval(), _Interval()]


class TestCapabilities:
    def test_ncube_is_partition(self) -> None:
        region = Ncube(torch.zeros(2), 1.0)
        assert isinstance(region, Partition)
        assert isinstance(region, Subdivide)

    def test_duck_typed_region(self) -> None:
        assert isinstance(_Interval(), Partition)
        assert isinstance(_Interval(), Subdivide)

    def test_plain_object_is_not_partition(self) -> None:
        assert not isinstance(object(), Partition)
        assert not isinstance(object(), Subdivide)

    def test_children_are_subdividable(self) -> None:
        children = Ncube(torch.zeros(3), 1.0).subdivide()
        assert all(isinstance(c, Subdivide) for c in children)


class TestLaws:
    @pytest.mark.parametrize(
        "point",
        [[0.5, 0.5], [0.0, 0.0], [1.0, 1.0], [-1.0, 0.0], [3.0, 3.0]],
    )
    def test_square_satisfies_laws(self, point: list) -> None:
        region = Ncube(torch.tensor([0.0, 0.0]), 2.0)
        check_partition_laws(region, point)
        check_containment_law(region, point)

    def test_recursive_descent(self) -> None:
        region = Ncube(torch.tensor([0.0, 0.0, 0.0]), 8.0)
        point = torch.tensor([1.0, -2.0, 3.0])
        for _ in range(4):
            check_partition_laws(region, point)
            region = region.subdivide()[region.dispatch(point)]
            assert region.contains(point)
        assert region.width.item() == 0.5

    def test_detects_misaligned_dispatch(self) -> None:
        class Flipped(Ncube):
            __slots__ = ()

            def dispatch(self, point) -> int:
                return (super().dispatch(point) + 1) % 4

        region = Flipped(torch.tensor([0.0, 0.0]), 2.0)
        with pytest.raises(AssertionError, match="dispatched to"):
            check_partition_laws(region, [0.5, 0.5])
