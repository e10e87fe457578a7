from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BuilderConfig:
    default_grid_columns: int = 2
    placeholder_image_size: float = 100.0
    default_image_fill: str = "contain"
    progress_max: float = 1.0
    slider_min: float = 0.0
    slider_max: float = 100.0
    slider_step: float = 1.0
    reload_poll_interval: float = 0.5
