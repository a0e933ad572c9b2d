"""Helpers for property-testing regions.

:mod:`ncube.testing.strategies` needs ``hypothesis`` (``pip install
ncube[test]``); :mod:`ncube.testing.laws` has no extra requirements.
"""

from ncube.testing.laws import check_containment_law, check_partition_laws

__all__ = ["check_containment_law", "check_partition_laws"]
