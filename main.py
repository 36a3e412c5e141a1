#!/usr/bin/env python3
"""
prismtracer - A Python Whitted-style Ray Tracer

Main entry point for rendering scenes.
"""

import argparse
import logging
import math
import sys
import time
from pathlib import Path

from prismtracer.camera import Camera
from prismtracer.color import Color
from prismtracer.lights import PointLight
from prismtracer.materials import Material
from prismtracer.matrix import IDENTITY
from prismtracer.patterns import Pattern
from prismtracer.renderer import Renderer, RenderSettings, get_platform_info
from prismtracer.scene_parser import SceneParseError, load_scene
from prismtracer.shapes import Shape
from prismtracer.transformations import view_transform
from prismtracer.tuples import Point, Vector
from prismtracer.world import World, WorldBuilder

logger = logging.getLogger("prismtracer")


def create_simple_scene() -> World:
    """Three matte spheres on a floor."""
    builder = WorldBuilder()

    builder.add_shape(Shape.plane(material=Material(color=Color(1, 0.9, 0.9), specular=0)))

    builder.add_shape(Shape.sphere(
        transform=IDENTITY.translation(-0.5, 1, 0.5),
        material=Material(color=Color(0.1, 1, 0.5), diffuse=0.7, specular=0.3),
    ))
    builder.add_shape(Shape.sphere(
        transform=IDENTITY.scaling(0.5, 0.5, 0.5).translation(1.5, 0.5, -0.5),
        material=Material(color=Color(0.5, 1, 0.1), diffuse=0.7, specular=0.3),
    ))
    builder.add_shape(Shape.sphere(
        transform=IDENTITY.scaling(0.33, 0.33, 0.33).translation(-1.5, 0.33, -0.75),
        material=Material(color=Color(1, 0.8, 0.1), diffuse=0.7, specular=0.3),
    ))

    builder.add_light_source(PointLight(Point(-10, 10, -10), Color(1, 1, 1)))
    return builder.build()


def create_reflection_scene() -> World:
    """Red, green and blue spheres over a half-mirrored floor."""
    builder = WorldBuilder()

    builder.add_shape(Shape.plane(
        material=Material(color=Color(1, 1, 1), specular=0, reflective=0.5),
    ))

    for x, color in ((-2.5, Color(1, 0, 0)), (0.0, Color(0, 1, 0)), (2.5, Color(0, 0, 1))):
        builder.add_shape(Shape.sphere(
            transform=IDENTITY.translation(x, 1, 0.5).scaling(0.7, 0.7, 0.7),
            material=Material(color=color, diffuse=0.7, specular=0.3, reflective=0.2),
        ))

    builder.add_light_source(PointLight(Point(-10, 10, -10), Color(1, 1, 1)))
    return builder.build()


def create_glass_scene() -> World:
    """A glass sphere with an air bubble above a checkered floor."""
    builder = WorldBuilder()

    checkers = Pattern.checkers(Color(0.5, 0.5, 0.5), Color(0.8, 0.8, 0.8))
    builder.add_shape(Shape.plane(material=Material(pattern=checkers, specular=0)))

    glass = Shape.glass_sphere(IDENTITY.translation(0, 1, 0))
    glass.material.color = Color(0.1, 0.1, 0.1)
    glass.material.reflective = 0.9
    builder.add_shape(glass)

    bubble = Shape.glass_sphere(IDENTITY.scaling(0.5, 0.5, 0.5).translation(0, 1, 0))
    bubble.material.refractive_index = 1.00029
    builder.add_shape(bubble)

    builder.add_light_source(PointLight(Point(-10, 10, -10), Color(1, 1, 1)))
    return builder.build()


def create_pattern_scene() -> World:
    """One sphere per pattern kind on a striped floor."""
    builder = WorldBuilder()

    stripes = Pattern.stripe(Color(0.9, 0.9, 0.9), Color(0.6, 0.6, 0.6))
    stripes.transform = IDENTITY.scaling(0.5, 0.5, 0.5).rotation_y(math.pi / 4)
    builder.add_shape(Shape.plane(material=Material(pattern=stripes, specular=0)))

    gradient = Pattern.gradient(Color(1, 0, 0), Color(0, 0, 1))
    gradient.transform = IDENTITY.scaling(2, 1, 1).translation(-1, 0, 0)
    rings = Pattern.ring(Color(1, 1, 0), Color(0, 0.5, 0))
    rings.transform = IDENTITY.scaling(0.2, 0.2, 0.2).rotation_x(math.pi / 2)
    checkers = Pattern.checkers(Color(1, 1, 1), Color(0.1, 0.1, 0.1))
    checkers.transform = IDENTITY.scaling(0.25, 0.25, 0.25)

    for x, pattern in ((-2.5, gradient), (0.0, rings), (2.5, checkers)):
        builder.add_shape(Shape.sphere(
            transform=IDENTITY.translation(x, 1, 0.5),
            material=Material(pattern=pattern, diffuse=0.7, specular=0.3),
        ))

    builder.add_light_source(PointLight(Point(-10, 10, -10), Color(1, 1, 1)))
    return builder.build()


SCENES = {
    'simple': create_simple_scene,
    'reflection': create_reflection_scene,
    'glass': create_glass_scene,
    'patterns': create_pattern_scene,
}


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description='prismtracer - A Python Whitted-style Ray Tracer',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Examples:
  python main.py --scene simple --output render.png
  python main.py --scene glass --width 400 --height 400 --threads 8 --output glass.ppm
  python main.py --scene-file scenes/demo.yaml --output demo.png
        '''
    )

    parser.add_argument('--width', type=int, default=200, help='Image width (default: 200)')
    parser.add_argument('--height', type=int, default=100, help='Image height (default: 100)')
    parser.add_argument('--fov', type=float, default=60.0, help='Field of view in degrees (default: 60)')
    parser.add_argument('--depth', type=int, default=5, help='Reflection/refraction recursion depth (default: 5)')
    parser.add_argument('--threads', type=int, default=1, help='Number of threads (0=auto, default: 1)')
    parser.add_argument('--output', type=str, default='output/render.png', help='Output filename (.ppm or any Pillow format)')
    parser.add_argument('--scene', type=str, default='simple', choices=sorted(SCENES),
                        help='Built-in scene to render (default: simple)')
    parser.add_argument('--scene-file', type=str, default=None,
                        help='YAML or JSON scene file (overrides --scene and camera options)')
    parser.add_argument('--log-level', type=str, default='INFO',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'], help='Logging level (default: INFO)')
    parser.add_argument('--info', action='store_true', help='Show platform info and exit')

    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )

    if args.info:
        info = get_platform_info()
        print("prismtracer Platform Info:")
        print(f"  System: {info['system']}")
        print(f"  Machine: {info['machine']}")
        print(f"  Processor: {info['processor']}")
        print(f"  Python: {info['python_version']}")
        print(f"  CPU Cores: {info['cpu_count']}")
        return 0

    if args.scene_file:
        try:
            world, camera, settings = load_scene(args.scene_file)
        except SceneParseError as e:
            logger.error("Could not load scene: %s", e)
            return 1
        logger.info("Loaded scene file %s", args.scene_file)
    else:
        try:
            settings = RenderSettings(max_depth=args.depth, num_threads=args.threads)
            camera = Camera(args.width, args.height, math.radians(args.fov))
        except ValueError as e:
            logger.error("Invalid options: %s", e)
            return 1
        camera.transform = view_transform(Point(0, 1.5, -5), Point(0, 1, 0), Vector(0, 1, 0))
        world = SCENES[args.scene]()
        logger.info("Created scene: %s", args.scene)

    logger.info("Objects in scene: %d", len(world))

    renderer = Renderer(settings)

    last_progress = [0]

    def progress_callback(progress: float):
        pct = int(progress * 100)
        if pct > last_progress[0]:
            last_progress[0] = pct
            bar_len = 40
            filled = int(bar_len * progress)
            bar = '█' * filled + '░' * (bar_len - filled)
            print(f'\rRendering: [{bar}] {pct}%', end='', flush=True)

    renderer.set_progress_callback(progress_callback)

    start_time = time.time()
    canvas = renderer.render(world, camera)
    elapsed = time.time() - start_time
    print()
    logger.info("Primary rays per second: %.0f", (camera.hsize * camera.vsize) / max(elapsed, 1e-9))

    output_path = Path(args.output)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    renderer.save_image(canvas, str(output_path))

    return 0


if __name__ == '__main__':
    sys.exit(main())
