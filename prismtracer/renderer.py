"""
Renderer module - drives a camera over a world.

Implements:
- Tile-based rendering
- Multi-threaded tiles (pixels are independent and the world is read-only)
- Progress reporting
- Image output (PPM text or any Pillow format)
"""

from __future__ import annotations
import logging
import os
import platform
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

import numpy as np

from .camera import Camera
from .canvas import Canvas
from .world import MAX_RECURSION_DEPTH, World

logger = logging.getLogger(__name__)

Tile = Tuple[int, int, int, int]


@dataclass
class RenderSettings:
    """Configuration for the renderer."""
    max_depth: int = MAX_RECURSION_DEPTH
    num_threads: int = 1  # 0 = auto-detect
    tile_size: int = 16

    def __post_init__(self):
        if self.max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {self.max_depth}")
        if self.tile_size <= 0:
            raise ValueError(f"tile_size must be > 0, got {self.tile_size}")
        if self.num_threads < 0:
            raise ValueError(f"num_threads must be >= 0, got {self.num_threads}")
        if self.num_threads == 0:
            self.num_threads = os.cpu_count() or 4


class Renderer:
    """Whitted-style renderer with optional multi-threading."""

    def __init__(self, settings: Optional[RenderSettings] = None):
        """Create a renderer with the given settings.

        Args:
            settings: Render configuration (uses defaults if None)
        """
        self.settings = settings if settings else RenderSettings()
        self._progress_callback: Optional[Callable[[float], None]] = None

    def set_progress_callback(self, callback: Callable[[float], None]) -> None:
        """Set a callback function for progress updates.

        Args:
            callback: Function that takes progress as float (0.0 to 1.0)
        """
        self._progress_callback = callback

    def render(self, world: World, camera: Camera) -> Canvas:
        """Render the world through the camera.

        Produces the same pixels as `Camera.render`; tiles only change the
        order in which they are computed.

        Args:
            world: The scene to render (must not change during the render)
            camera: The camera to render from

        Returns:
            Canvas of camera.hsize x camera.vsize colors
        """
        width = camera.hsize
        height = camera.vsize
        max_depth = self.settings.max_depth

        tiles = self._generate_tiles(width, height)
        total_tiles = len(tiles)
        completed_tiles = [0]  # Use list for mutable in closure
        progress_lock = threading.Lock()

        logger.info(
            "Rendering %dx%d with %d shapes, depth %d, %d tiles on %d thread(s)",
            width, height, len(world), max_depth, total_tiles, self.settings.num_threads,
        )
        start = time.perf_counter()

        def render_tile(tile: Tile) -> Tuple[Tile, np.ndarray]:
            """Render a single tile."""
            x0, y0, x1, y1 = tile
            tile_image = np.zeros((y1 - y0, x1 - x0, 3), dtype=np.float64)

            for y in range(y0, y1):
                for x in range(x0, x1):
                    ray = camera.ray_for_pixel(x, y)
                    tile_image[y - y0, x - x0] = world.color_at(ray, max_depth).to_array()

            # Callbacks run under the lock so reported progress never goes backwards
            with progress_lock:
                completed_tiles[0] += 1
                done = completed_tiles[0]
                logger.debug("Finished tile %s (%d/%d)", tile, done, total_tiles)
                if self._progress_callback:
                    self._progress_callback(done / total_tiles)

            return tile, tile_image

        if self.settings.num_threads > 1:
            with ThreadPoolExecutor(max_workers=self.settings.num_threads) as executor:
                results = list(executor.map(render_tile, tiles))
        else:
            results = [render_tile(tile) for tile in tiles]

        canvas = Canvas(width, height)
        for (x0, y0, _, _), tile_image in results:
            canvas.write_block(x0, y0, tile_image)

        logger.info("Render finished in %.2f seconds", time.perf_counter() - start)
        return canvas

    def _generate_tiles(self, width: int, height: int) -> list[Tile]:
        """Split the image into tiles as (x0, y0, x1, y1) tuples."""
        tile_size = self.settings.tile_size
        tiles = []

        for y in range(0, height, tile_size):
            for x in range(0, width, tile_size):
                x1 = min(x + tile_size, width)
                y1 = min(y + tile_size, height)
                tiles.append((x, y, x1, y1))

        return tiles

    def save_image(self, canvas: Canvas, filename: str) -> None:
        """Save a rendered canvas; the extension picks the format."""
        canvas.save(filename)
        logger.info("Saved %s", filename)


def get_platform_info() -> dict:
    """Get information about the current platform.

    Returns:
        Dictionary with platform details
    """
    info = {
        'system': platform.system(),
        'machine': platform.machine(),
        'processor': platform.processor(),
        'python_version': platform.python_version(),
        'cpu_count': os.cpu_count(),
        'is_arm': platform.machine().lower() in ('arm64', 'aarch64'),
        'is_x86': platform.machine().lower() in ('x86_64', 'amd64', 'x86'),
    }
    return info
