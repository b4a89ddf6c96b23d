# camera/camera.py
import logging
import math
from typing import Iterator, Optional

import numpy as np
from tqdm import tqdm

from core.ray import Ray
from core.utils import make_rng, random_on_hemisphere, sample_square
from core.vector import Colour, Point3, Vector3
from geometry.hittable import Hittable

logger = logging.getLogger(__name__)

SHADING_MODES = ("diffuse", "normals")
DEFAULT_MAX_DEPTH = 50

WHITE = Colour(1.0, 1.0, 1.0)
SKY_BLUE = Colour(0.5, 0.7, 1.0)


def check_settings(aspect_ratio: float, image_width: int, samples_per_pixel: int,
                   max_depth: int, shading: str):
    """
    Raises ValueError for camera settings that cannot produce an image.
    """
    if not aspect_ratio > 0:
        raise ValueError(f"aspect_ratio must be positive, got {aspect_ratio}")
    if image_width < 1:
        raise ValueError(f"image_width must be positive, got {image_width}")
    if samples_per_pixel < 1:
        raise ValueError(f"samples_per_pixel must be positive, got {samples_per_pixel}")
    if max_depth < 0:
        raise ValueError(f"max_depth must not be negative, got {max_depth}")
    if shading not in SHADING_MODES:
        raise ValueError(f"unknown shading mode {shading!r}, expected one of {SHADING_MODES}")


class Camera:
    """
    A pinhole camera at the origin looking down -z.

    All viewport geometry is derived once from the aspect ratio and image
    width. Rendering walks the pixels in scan order, averages
    `samples_per_pixel` jittered samples per pixel and resolves each sample
    ray to a linear colour.
    """
    def __init__(self, aspect_ratio: float = 1.0, image_width: int = 400,
                 samples_per_pixel: int = 10, max_depth: int = DEFAULT_MAX_DEPTH,
                 shading: str = "diffuse", jitter: bool = True,
                 seed: Optional[int] = None,
                 rng: Optional[np.random.Generator] = None):
        check_settings(aspect_ratio, image_width, samples_per_pixel, max_depth, shading)

        self.aspect_ratio = aspect_ratio
        self.image_width = int(image_width)
        self.image_height = max(1, int(round(self.image_width / aspect_ratio)))
        self.samples_per_pixel = int(samples_per_pixel)
        self.pixel_samples_scale = 1.0 / self.samples_per_pixel
        self.max_depth = int(max_depth)
        self.shading = shading
        self.jitter = jitter
        self.rng = rng if rng is not None else make_rng(seed)

        self.center = Point3(0.0, 0.0, 0.0)
        self.focal_length = 1.0
        self.viewport_height = 2.0
        # Use the realised pixel ratio so pixels stay square after rounding.
        self.viewport_width = self.viewport_height * (self.image_width / self.image_height)
        logger.debug("focal length %s, viewport %s x %s, center %s",
                     self.focal_length, self.viewport_width, self.viewport_height, self.center)

        # Edges across the viewport: u runs right, v runs down.
        self.viewport_u = Vector3(self.viewport_width, 0.0, 0.0)
        self.viewport_v = Vector3(0.0, -self.viewport_height, 0.0)

        self.pixel_delta_u = self.viewport_u / self.image_width
        self.pixel_delta_v = self.viewport_v / self.image_height
        logger.debug("pixel_delta_u %r, pixel_delta_v %r", self.pixel_delta_u, self.pixel_delta_v)

        viewport_upper_left = (self.center
                               - Vector3(0.0, 0.0, self.focal_length)
                               - self.viewport_u / 2
                               - self.viewport_v / 2)
        self.pixel00_loc = viewport_upper_left + 0.5 * (self.pixel_delta_u + self.pixel_delta_v)
        logger.debug("pixel00_loc %r", self.pixel00_loc)

    def get_ray(self, i: int, j: int) -> Ray:
        """
        Returns a ray from the camera center through a point sampled around
        pixel (i, j). Without jitter the point is the pixel center.
        """
        if self.jitter:
            offset = sample_square(self.rng)
        else:
            offset = Vector3(0.0, 0.0, 0.0)
        pixel_sample = (self.pixel00_loc
                        + (i + offset.x) * self.pixel_delta_u
                        + (j + offset.y) * self.pixel_delta_v)
        return Ray(self.center, pixel_sample - self.center)

    def ray_colour(self, ray: Ray, world: Hittable, depth: int) -> Colour:
        """
        Returns the linear colour seen along the ray. Diffuse shading scatters
        into the hemisphere around the normal and keeps half the energy per
        bounce; after `depth` bounces no more light is gathered.
        """
        if depth <= 0:
            return Colour(0.0, 0.0, 0.0)

        rec = world.hit(ray, 0.0, math.inf)
        if rec is not None:
            if self.shading == "normals":
                return 0.5 * (rec.normal + WHITE)
            direction = random_on_hemisphere(rec.normal, self.rng)
            return 0.5 * self.ray_colour(Ray(rec.p, direction), world, depth - 1)

        return background(ray)

    def pixel_colour(self, world: Hittable, i: int, j: int) -> Colour:
        colour = Colour(0.0, 0.0, 0.0)
        for _ in range(self.samples_per_pixel):
            colour += self.ray_colour(self.get_ray(i, j), world, self.max_depth)
        return self.pixel_samples_scale * colour

    def render_pixels(self, world: Hittable, progress: bool = False) -> Iterator[Colour]:
        """
        Yields one averaged colour per pixel, rows top to bottom and each row
        left to right.
        """
        logger.info("Rendering %dx%d image, %d samples per pixel",
                    self.image_width, self.image_height, self.samples_per_pixel)
        with tqdm(range(self.image_height), desc="Scanlines", unit="row",
                  disable=not progress, leave=False) as rows:
            for j in rows:
                for i in range(self.image_width):
                    yield self.pixel_colour(world, i, j)
        logger.info("Done")

    def render(self, world: Hittable, progress: bool = False) -> np.ndarray:
        """
        Renders the world into a linear float image of shape (height, width, 3).
        """
        image = np.zeros((self.image_height, self.image_width, 3), dtype=np.float64)
        pixels = self.render_pixels(world, progress=progress)
        for index, colour in enumerate(pixels):
            j, i = divmod(index, self.image_width)
            image[j, i] = (colour.x, colour.y, colour.z)
        return image


def background(ray: Ray) -> Colour:
    """
    Sky gradient: white at the horizon blending to blue straight up.
    """
    unit_direction = ray.direction.normalize()
    a = 0.5 * (unit_direction.y + 1.0)
    return (1.0 - a) * WHITE + a * SKY_BLUE
