# main.py
import argparse
import logging
import sys
from typing import List, Optional

from camera.camera import SHADING_MODES
from geometry.scenes import SCENES
from renderer.image import gradient_image, save_image, write_ppm
from renderer.settings import QUALITY_PRESETS, RenderSettings

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pathtracer",
        description="Render a sphere scene by tracing diffuse light paths.",
    )
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log camera geometry and other debug detail")
    commands = parser.add_subparsers(dest="command", required=True)

    render = commands.add_parser("render", help="Render a scene")
    render.add_argument("--scene", choices=sorted(SCENES), default="sphere_on_ground")
    render.add_argument("--preset", choices=sorted(QUALITY_PRESETS), default="balanced",
                        help="Quality preset to start from (default: balanced)")
    render.add_argument("--width", type=int, help="Image width in pixels")
    render.add_argument("--aspect", type=float, default=16.0 / 9.0,
                        help="Width / height ratio (default: 16/9)")
    render.add_argument("--samples", type=int, help="Samples per pixel")
    render.add_argument("--depth", type=int, help="Maximum bounce depth")
    render.add_argument("--shading", choices=SHADING_MODES, default="diffuse")
    render.add_argument("--seed", type=int, help="Seed for reproducible sampling")
    render.add_argument("--no-jitter", action="store_true",
                        help="Sample pixel centers instead of random points")
    render.add_argument("--no-progress", action="store_true",
                        help="Hide the scanline progress bar")
    render.add_argument("-o", "--output", default="-",
                        help="Output path; .png writes PNG, '-' writes PPM to stdout")

    gradient = commands.add_parser("gradient", help="Write a test gradient image")
    gradient.add_argument("--width", type=int, default=256)
    gradient.add_argument("--height", type=int, default=256)
    gradient.add_argument("-o", "--output", default="-")
    return parser


def configure_logging(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def run_render(args, parser: argparse.ArgumentParser) -> int:
    try:
        settings = RenderSettings.from_preset(
            args.preset,
            aspect_ratio=args.aspect,
            image_width=args.width,
            samples_per_pixel=args.samples,
            max_depth=args.depth,
            shading=args.shading,
            jitter=not args.no_jitter,
            seed=args.seed,
        )
        camera = settings.build_camera()
    except ValueError as exc:
        parser.error(str(exc))

    logger.info("Initialising the world: %s", args.scene)
    world = SCENES[args.scene]()
    progress = not args.no_progress

    if args.output == "-":
        write_ppm(sys.stdout, camera.image_width, camera.image_height,
                  camera.render_pixels(world, progress=progress))
    else:
        save_image(args.output, camera.render(world, progress=progress))
        logger.info("Wrote %s", args.output)
    return 0


def run_gradient(args, parser: argparse.ArgumentParser) -> int:
    if args.width < 1 or args.height < 1:
        parser.error("width and height must be positive")
    save_image(args.output, gradient_image(args.width, args.height))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)
    if args.command == "render":
        return run_render(args, parser)
    return run_gradient(args, parser)


if __name__ == "__main__":
    sys.exit(main())
