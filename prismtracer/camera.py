"""
Camera module for generating primary rays.

The camera sits at the origin of its own space, looking toward -z, with
the canvas one unit in front of it. `transform` maps world space to camera
space (see `view_transform`); rays are generated in camera space and moved
into the world with its inverse.
"""

from __future__ import annotations
import math

from .canvas import Canvas
from .matrix import IDENTITY, Matrix
from .ray import Ray
from .tuples import ORIGIN, Point, normalize
from .world import MAX_RECURSION_DEPTH, World


class Camera:
    """A pinhole camera with a rectangular canvas of hsize x vsize pixels."""

    def __init__(self, hsize: int, vsize: int, field_of_view: float, transform: Matrix = IDENTITY):
        """Create a camera.

        Args:
            hsize: Horizontal size of the canvas in pixels
            vsize: Vertical size of the canvas in pixels
            field_of_view: Angle (radians) covered by the longer canvas side
            transform: World-to-camera transform (must be invertible)
        """
        if hsize <= 0 or vsize <= 0:
            raise ValueError(f"Camera size must be positive, got {hsize}x{vsize}")

        self.hsize = hsize
        self.vsize = vsize
        self.field_of_view = field_of_view
        self.transform = transform

        half_view = math.tan(field_of_view / 2)
        aspect = hsize / vsize

        if aspect >= 1:
            self.half_width = half_view
            self.half_height = half_view / aspect
        else:
            self.half_width = half_view * aspect
            self.half_height = half_view

        self.pixel_size = (self.half_width * 2) / hsize

    @property
    def transform(self) -> Matrix:
        return self._transform

    @transform.setter
    def transform(self, matrix: Matrix) -> None:
        self._inverse = matrix.inverse_or_raise()
        self._transform = matrix

    def ray_for_pixel(self, x: int, y: int) -> Ray:
        """World-space ray from the eye through the center of pixel (x, y)."""
        # Offset from the canvas edge to the pixel's center
        xoffset = (x + 0.5) * self.pixel_size
        yoffset = (y + 0.5) * self.pixel_size

        # The camera looks toward -z, so +x is to the left
        world_x = self.half_width - xoffset
        world_y = self.half_height - yoffset

        pixel = self._inverse * Point(world_x, world_y, -1)
        origin = self._inverse * ORIGIN
        direction = normalize(pixel - origin)

        return Ray(origin, direction)

    def render(self, world: World, remaining: int = MAX_RECURSION_DEPTH) -> Canvas:
        """Render every pixel sequentially into a new canvas.

        Args:
            world: Scene to render (treated as read-only)
            remaining: Recursion budget for reflection and refraction

        Returns:
            Canvas of hsize x vsize colors
        """
        image = Canvas(self.hsize, self.vsize)
        for y in range(self.vsize):
            for x in range(self.hsize):
                ray = self.ray_for_pixel(x, y)
                image.write_pixel(x, y, world.color_at(ray, remaining))
        return image

    def __repr__(self) -> str:
        return f"Camera({self.hsize}x{self.vsize}, fov={self.field_of_view:.4f})"
