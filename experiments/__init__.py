"""Experiment framework for the tour evolution solver."""

from .configs import (
    BASE_CONFIGS,
    HARD_CONFIGS,
    InstanceConfig,
)

__all__ = [
    "BASE_CONFIGS",
    "HARD_CONFIGS",
    "InstanceConfig",
]
