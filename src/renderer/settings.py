# renderer/settings.py
from dataclasses import dataclass, replace
from typing import Optional

from camera.camera import DEFAULT_MAX_DEPTH, Camera, check_settings

# Samples, bounce depth and width for each quality level.
QUALITY_PRESETS = {
    "preview": {"samples_per_pixel": 1, "max_depth": 4, "image_width": 160},
    "balanced": {"samples_per_pixel": 10, "max_depth": 10, "image_width": 400},
    "high_quality": {"samples_per_pixel": 100, "max_depth": DEFAULT_MAX_DEPTH, "image_width": 400},
}


@dataclass(frozen=True)
class RenderSettings:
    """Everything needed to build a camera for one render."""
    aspect_ratio: float = 16.0 / 9.0
    image_width: int = 400
    samples_per_pixel: int = 10
    max_depth: int = DEFAULT_MAX_DEPTH
    shading: str = "diffuse"
    jitter: bool = True
    seed: Optional[int] = None

    @classmethod
    def from_preset(cls, name: str, **overrides) -> "RenderSettings":
        """
        Starts from a named quality preset. Overrides set to None are ignored,
        so unset command-line options fall back to the preset.
        """
        if name not in QUALITY_PRESETS:
            raise KeyError(f"unknown preset {name!r}, expected one of {sorted(QUALITY_PRESETS)}")
        settings = cls(**QUALITY_PRESETS[name])
        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(settings, **changes)

    def validate(self) -> "RenderSettings":
        check_settings(self.aspect_ratio, self.image_width, self.samples_per_pixel,
                       self.max_depth, self.shading)
        return self

    def build_camera(self) -> Camera:
        return Camera(
            aspect_ratio=self.aspect_ratio,
            image_width=self.image_width,
            samples_per_pixel=self.samples_per_pixel,
            max_depth=self.max_depth,
            shading=self.shading,
            jitter=self.jitter,
            seed=self.seed,
        )
