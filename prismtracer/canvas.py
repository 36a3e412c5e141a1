"""
Pixel buffer and image encoders.

Colors are stored unclamped; the encoders clamp to [0, 1] and scale to
8 bits when writing PPM text or any format Pillow understands.
"""

from __future__ import annotations
from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image

from .color import Color


PPM_MAX_LINE_LENGTH = 70


class Canvas:
    """A width x height grid of colors, black by default."""

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self._pixels = np.zeros((height, width, 3), dtype=np.float64)

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height} canvas")

    def write_pixel(self, x: int, y: int, color: Color) -> None:
        self._check_bounds(x, y)
        self._pixels[y, x] = color.to_array()

    def pixel_at(self, x: int, y: int) -> Color:
        self._check_bounds(x, y)
        return Color.from_array(self._pixels[y, x].copy())

    def write_block(self, x0: int, y0: int, block: np.ndarray) -> None:
        """Copy a (rows, cols, 3) array of colors with its top-left at (x0, y0)."""
        rows, cols = block.shape[:2]
        self._check_bounds(x0, y0)
        self._check_bounds(x0 + cols - 1, y0 + rows - 1)
        self._pixels[y0:y0 + rows, x0:x0 + cols] = block

    def to_array(self) -> np.ndarray:
        """HDR pixel data as a (height, width, 3) float64 array (copy)."""
        return self._pixels.copy()

    def to_ldr(self) -> np.ndarray:
        """Clamp to [0, 1] and scale to 8-bit integers."""
        return np.clip(np.round(self._pixels * 255.0), 0, 255).astype(np.uint8)

    def to_ppm(self) -> str:
        """Encode as a plain-text (P3) PPM document.

        Lines are wrapped so none exceeds 70 characters, and the document
        ends with a newline.
        """
        lines = ["P3", f"{self.width} {self.height}", "255"]
        ldr = self.to_ldr()

        for row in ldr:
            line = ""
            for value in row.reshape(-1):
                token = str(int(value))
                if not line:
                    line = token
                elif len(line) + 1 + len(token) > PPM_MAX_LINE_LENGTH:
                    lines.append(line)
                    line = token
                else:
                    line = f"{line} {token}"
            lines.append(line)

        return "\n".join(lines) + "\n"

    def to_image(self) -> Image.Image:
        """Convert to an 8-bit Pillow RGB image."""
        return Image.fromarray(self.to_ldr(), 'RGB')

    def save(self, filename: Union[str, Path]) -> None:
        """Save to file; `.ppm` is written as text, other extensions via Pillow."""
        path = Path(filename)
        if path.suffix.lower() == '.ppm':
            path.write_text(self.to_ppm())
        else:
            self.to_image().save(path)

    def __repr__(self) -> str:
        return f"Canvas({self.width}x{self.height})"
