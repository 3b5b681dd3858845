import argparse

from .constants import (
    CANVAS_HEIGHT,
    CANVAS_WIDTH,
    DEFAULT_EXPONENT,
    DEFAULT_MANTISSA,
    DEFAULT_ZOOM,
    TARGET_LINES,
)
from .scene import ArgandState, DisplayOptions, build_scene


def build_parser():
    parser = argparse.ArgumentParser(
        prog="pyargand",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "-i",
        "--interactive",
        action="store_true",
        help="open the interactive pygame viewer instead of writing an image",
    )
    parser.add_argument(
        "--theta",
        type=float,
        default=0.0,
        help="the angle of z, in radians (unbounded)",
    )
    parser.add_argument(
        "-m",
        "--mantissa",
        type=float,
        default=DEFAULT_MANTISSA,
        help="the mantissa of the magnitude r = m x 10^exp",
    )
    parser.add_argument(
        "-e",
        "--exponent",
        type=int,
        default=DEFAULT_EXPONENT,
        help="the exponent of the magnitude, clamped to [-300, 300]",
    )
    parser.add_argument(
        "-z",
        "--zoom",
        type=float,
        default=DEFAULT_ZOOM,
        help="pixels per world unit",
    )
    parser.add_argument(
        "--dims",
        type=int,
        default=[CANVAS_WIDTH, CANVAS_HEIGHT],
        nargs=2,
        help="The dimensions of the canvas, in pixels",
    )
    parser.add_argument(
        "--target-lines",
        type=int,
        default=TARGET_LINES,
        help="roughly how many grid lines to show per half-axis",
    )
    parser.add_argument(
        "--no-projections",
        action="store_true",
        help="hide the dashed projections onto the axes",
    )
    parser.add_argument(
        "--no-arc",
        action="store_true",
        help="hide the angle arc",
    )
    parser.add_argument(
        "-o",
        "--out-file",
        default="argand.png",
        help="The output file to write to",
    )
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.target_lines <= 0:
        parser.error(f"--target-lines must be positive, got {args.target_lines}")

    state = ArgandState(
        theta=args.theta,
        mantissa=args.mantissa,
        exponent=args.exponent,
        zoom=args.zoom,
    )
    options = DisplayOptions(
        show_projections=not args.no_projections,
        show_arc=not args.no_arc,
    )
    width, height = args.dims

    try:
        scene = build_scene(state, width, height, options, args.target_lines)
    except ValueError as e:
        parser.error(str(e))

    if args.interactive:
        from .viewer import ArgandViewer

        ArgandViewer(width, height, state=state, options=options).run()
        return

    from .raster import render_scene

    print(f"z = r e^(i theta), theta: {args.theta}")
    print(f"r: {scene.readouts['r']} (exponent used: {scene.exponent})")
    print(f"zoom: {args.zoom}")
    print(f"dims: {args.dims}")
    print(f"x step: {_step(scene.x_ticks)}, y step: {_step(scene.y_ticks)}")
    print(f"img_name: {args.out_file}")

    render_scene(scene, args.out_file)


def _step(values):
    return values[1] - values[0] if len(values) > 1 else 0.0


if __name__ == "__main__":
    main()
