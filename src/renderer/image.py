# renderer/image.py
"""
Colour output for rendered images.

Colours arrive in linear space. Output clamps each component to
[0, 0.999] and scales by 256, truncating, so every value lands in
[0, 255]. No gamma correction is applied.
"""
import sys
from typing import Iterable, TextIO

import numpy as np
from PIL import Image

from core.vector import Colour

MAX_INTENSITY = 0.999


def write_colour(colour: Colour) -> str:
    """
    Formats a linear colour as a "r g b" byte triple.
    """
    r, g, b = (int(256 * min(max(c, 0.0), MAX_INTENSITY)) for c in colour)
    return f"{r} {g} {b}"


def to_bytes(image: np.ndarray) -> np.ndarray:
    """
    Quantizes a linear (height, width, 3) float image to uint8 the same way
    write_colour does for a single pixel.
    """
    clamped = np.clip(image, 0.0, MAX_INTENSITY)
    return (256 * clamped).astype(np.uint8)


def write_ppm(stream: TextIO, width: int, height: int, colours: Iterable[Colour]):
    """
    Writes a plain-text P3 image: the header, then one triple per pixel in
    the order the colours are given.
    """
    stream.write(f"P3\n{width} {height}\n255\n")
    for colour in colours:
        stream.write(write_colour(colour))
        stream.write("\n")


def image_to_ppm(stream: TextIO, image: np.ndarray):
    height, width, _ = image.shape
    stream.write(f"P3\n{width} {height}\n255\n")
    for r, g, b in to_bytes(image).reshape(-1, 3):
        stream.write(f"{r} {g} {b}\n")


def save_ppm(path: str, image: np.ndarray):
    if path == "-":
        image_to_ppm(sys.stdout, image)
        return
    with open(path, "w") as f:
        image_to_ppm(f, image)


def save_png(path: str, image: np.ndarray):
    Image.fromarray(to_bytes(image)).save(path)


def save_image(path: str, image: np.ndarray):
    """
    Saves by extension: .png through Pillow, anything else as P3 text.
    """
    if path.lower().endswith(".png"):
        save_png(path, image)
    else:
        save_ppm(path, image)


def gradient_image(width: int = 256, height: int = 256) -> np.ndarray:
    """
    Test pattern: red ramps left to right, green top to bottom, blue is zero.
    """
    image = np.zeros((height, width, 3), dtype=np.float64)
    image[:, :, 0] = np.linspace(0.0, 1.0, width)[np.newaxis, :]
    image[:, :, 1] = np.linspace(0.0, 1.0, height)[:, np.newaxis]
    return image
