"""Core configuration for the life timeline planner."""

from .config import CONFIG, ChartOptions, PlannerConfig, StorageConfig, ValidationConfig

__all__ = [
    "CONFIG",
    "PlannerConfig",
    "StorageConfig",
    "ValidationConfig",
    "ChartOptions",
]
