"""Default dtype / device used when regions are built from plain numbers."""

from __future__ import annotations

import logging
import os
import threading
from dataclasses import dataclass, field

import torch

logger = logging.getLogger(__name__)

_DTYPES = {
    "float16": torch.float16,
    "bfloat16": torch.bfloat16,
    "float32": torch.float32,
    "float64": torch.float64,
}


@dataclass(frozen=True)
class GeometryConfig:
    """Tensor settings for points and regions.

    Attributes:
        dtype: Floating dtype of centres, widths and points.
        device: Torch device tensors are placed on.
    """

    dtype: torch.dtype = torch.float32
    device: torch.device = field(default_factory=lambda: torch.device("cpu"))

    def __post_init__(self) -> None:
        if not self.dtype.is_floating_point:
            raise TypeError(f"dtype must be floating point, got {self.dtype}")
        if not isinstance(self.device, torch.device):
            object.__setattr__(self, "device", torch.device(self.device))

    @classmethod
    def from_env(cls) -> GeometryConfig:
        """Build a config from ``NCUBE_DTYPE`` and ``NCUBE_DEVICE``.

        Unset variables fall back to the dataclass defaults.
        """
        kwargs: dict[str, object] = {}
        dtype_name = os.getenv("NCUBE_DTYPE")
        if dtype_name:
            try:
                kwargs["dtype"] = _DTYPES[dtype_name.strip().lower()]
            except KeyError:
                raise ValueError(
                    f"NCUBE_DTYPE must be one of {sorted(_DTYPES)}, got {dtype_name!r}"
                ) from None
        device_name = os.getenv("NCUBE_DEVICE")
        if device_name:
            kwargs["device"] = torch.device(device_name.strip())
        config = cls(**kwargs)
        logger.debug("Loaded geometry config from environment: %s", config)
        return config


_lock = threading.Lock()
_default: GeometryConfig | None = None


def get_default_config() -> GeometryConfig:
    """Return the process-wide default, reading the environment on first use."""
    global _default
    with _lock:
        if _default is None:
            _default = GeometryConfig.from_env()
        return _default


def set_default_config(config: GeometryConfig | None) -> None:
    """Replace the process-wide default (``None`` re-reads the environment)."""
    global _default
    with _lock:
        _default = config
