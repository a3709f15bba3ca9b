"""
Command line tools for spline files.

Examples:
  splineomatic new path.json --curves 3 --loop --mode mirrored
  splineomatic sample path.json --steps 20
  splineomatic directions path.json --steps 5
  splineomatic walk path.json --duration 2 --dt 0.1 --steps 30 --mode ping_pong
"""
import argparse
import logging
import sys

from .config import Config, load_config
from .errors import SplineError
from .spline import BezierSpline, ControlPointMode
from .walker import SplineWalker, WalkerMode

logger = logging.getLogger(__name__)


def _format(p):
    return " ".join(f"{c:.6f}" for c in p)


def _config(args):
    return load_config(args.config) if args.config else Config()


def cmd_new(args):
    cfg = _config(args)
    spline = BezierSpline(cfg.spline.new_curve_offset)
    for _ in range(args.curves - 1):
        spline.add_curve()
    if args.mode is not None:
        for i in range(0, spline.control_point_count, 3):
            spline.set_control_point_mode(i, args.mode)
    spline.loop = args.loop
    spline.save(args.out)
    logger.info("saved %d curves to %s", spline.curve_count, args.out)


def cmd_sample(args):
    cfg = _config(args)
    steps = args.steps if args.steps is not None else cfg.preview.steps_per_curve
    spline = BezierSpline.load(args.file, cfg.spline.new_curve_offset)
    for p in spline.sample(steps):
        print(_format(p))


def cmd_directions(args):
    cfg = _config(args)
    steps = args.steps if args.steps is not None else cfg.preview.steps_per_curve
    spline = BezierSpline.load(args.file, cfg.spline.new_curve_offset)
    for origin, tip in spline.directions(steps, cfg.preview.direction_scale):
        print(f"{_format(origin)} {_format(tip)}")


def cmd_walk(args):
    cfg = _config(args)
    spline = BezierSpline.load(args.file, cfg.spline.new_curve_offset)
    walker = SplineWalker(
        spline,
        args.duration if args.duration is not None else cfg.walker.duration,
        mode=args.mode if args.mode is not None else cfg.walker.mode,
        look_forward=args.look_forward or cfg.walker.look_forward,
    )
    for _ in range(args.steps):
        state = walker.step(args.dt)
        line = f"{state.progress:.6f} {_format(state.position)}"
        if state.direction is not None:
            line += " " + _format(state.direction)
        print(line)


def build_parser():
    parser = argparse.ArgumentParser(prog="splineomatic", description="Bezier spline tools")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    parser.add_argument("--config", help="JSON config file")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("new", help="create a spline file")
    p.add_argument("out")
    p.add_argument("--curves", type=int, default=1)
    p.add_argument("--loop", action="store_true")
    p.add_argument("--mode", choices=[m.value for m in ControlPointMode])
    p.set_defaults(func=cmd_new)

    p = sub.add_parser("sample", help="print points along a spline")
    p.add_argument("file")
    p.add_argument("--steps", type=int, help="samples per curve")
    p.set_defaults(func=cmd_sample)

    p = sub.add_parser("directions", help="print direction lines along a spline")
    p.add_argument("file")
    p.add_argument("--steps", type=int, help="lines per curve")
    p.set_defaults(func=cmd_directions)

    p = sub.add_parser("walk", help="print walker positions over time")
    p.add_argument("file")
    p.add_argument("--duration", type=float)
    p.add_argument("--dt", type=float, default=0.1)
    p.add_argument("--steps", type=int, default=10)
    p.add_argument("--mode", choices=[m.value for m in WalkerMode])
    p.add_argument("--look-forward", action="store_true")
    p.set_defaults(func=cmd_walk)
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if getattr(args, "curves", 1) < 1:
        logger.error("--curves must be >= 1")
        return 1
    try:
        args.func(args)
    except (SplineError, OSError, ValueError) as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
