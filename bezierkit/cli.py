import logging
import colorlog
import argparse
import sys
from typing import List, Optional
from .config import CurveConfig, DEFAULT_CONFIG
from .curves import Curve
from .exceptions import BezierError, InvalidArgumentError
from .geometry import Point

LOG_FORMAT = '%(blue)s[%(asctime)s]%(reset)s %(log_color)s[%(levelname)s]%(reset)s %(purple)s[%(filename)s:%(lineno)d]%(reset)s: %(message)s'

def setup_logging(level: int = logging.INFO) -> logging.Logger:
    handler = colorlog.StreamHandler()
    handler.setFormatter(colorlog.ColoredFormatter(
        LOG_FORMAT,
        datefmt='%H:%M:%S',
        log_colors={
            'DEBUG': 'cyan',
            'INFO': 'green',
            'WARNING': 'yellow',
            'ERROR': 'red',
            'CRITICAL': 'red,bg_white',
        },
        secondary_log_colors={
            'message': {
                'DEBUG': 'cyan',
                'INFO': 'green',
                'WARNING': 'yellow',
                'ERROR': 'red',
                'CRITICAL': 'red',
            }
        },
        style='%'
    ))

    logger = logging.getLogger()
    logger.setLevel(level)
    logger.handlers = [handler]
    return logger


def parse_point(value: str) -> Point:
    """Parse an "x,y" command line value"""
    parts = value.split(',')
    try:
        return Point.from_array([float(part) for part in parts])
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"Invalid point '{value}', expected x,y: {e}")


def format_point(point: Point) -> str:
    return f"({point.x:.6g}, {point.y:.6g})"


def evaluate_curve(curve: Curve, t: float) -> List[str]:
    return [
        f"point:      {format_point(curve.evaluate(t))}",
        f"derivative: {format_point(curve.derivative(t))}",
        f"tangent:    {format_point(curve.tangent(t))}",
        f"normal:     {format_point(curve.normal(t))}",
    ]


def split_curve(curve: Curve, t: float) -> List[str]:
    left, right = curve.split(t)
    return [
        "left:  " + " ".join(format_point(p) for p in left.control_points),
        "right: " + " ".join(format_point(p) for p in right.control_points),
    ]


def walk_curve(curve: Curve, count: int, config: CurveConfig) -> List[str]:
    """Points spaced evenly by arc length, count + 1 of them including both ends"""
    total = curve.length(config.distance_samples)
    lines = []
    for i in range(count + 1):
        distance = min(total, total * i / count)
        point = curve.point_at_distance(distance, config.distance_samples)
        lines.append(f"{distance:.6g}: {format_point(point)}")
    return lines


def intersect_curves(curve_a: Curve, curve_b: Curve, config: CurveConfig) -> List[str]:
    found = curve_a.intersections(curve_b, config.intersection_tolerance, config.intersection_max_depth)
    logging.info(f"Found {len(found)} intersections")
    return [f"{format_point(hit.point)} t1={hit.t1:.6g} t2={hit.t2:.6g}" for hit in found]


def parse_args(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(description='Evaluate, measure and intersect Bezier curves')
    parser.add_argument('--verbose', action='store_true', help='Enable debug logging')
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    evaluate_parser = subparsers.add_parser('evaluate', help='Position, derivative, tangent and normal at t')
    evaluate_parser.add_argument('points', nargs='+', type=parse_point, help='Control points as x,y')
    evaluate_parser.add_argument('--t', type=float, required=True, help='Curve parameter')

    split_parser = subparsers.add_parser('split', help='Split a curve at t')
    split_parser.add_argument('points', nargs='+', type=parse_point, help='Control points as x,y')
    split_parser.add_argument('--t', type=float, default=0.5, help='Curve parameter')

    length_parser = subparsers.add_parser('length', help='Arc length of a curve')
    length_parser.add_argument('points', nargs='+', type=parse_point, help='Control points as x,y')
    length_parser.add_argument('--samples', type=int, default=None, help='Integration samples')

    walk_parser = subparsers.add_parser('walk', help='Points evenly spaced by arc length')
    walk_parser.add_argument('points', nargs='+', type=parse_point, help='Control points as x,y')
    walk_parser.add_argument('--count', type=int, default=10, help='Number of steps')
    walk_parser.add_argument('--samples', type=int, default=None, help='Arc length table samples')

    intersect_parser = subparsers.add_parser('intersect', help='Intersections of two curves')
    intersect_parser.add_argument('--curve-a', nargs='+', type=parse_point, required=True, help='First curve control points')
    intersect_parser.add_argument('--curve-b', nargs='+', type=parse_point, required=True, help='Second curve control points')
    intersect_parser.add_argument('--tolerance', type=float, default=None, help='Intersection tolerance')
    intersect_parser.add_argument('--max-depth', type=int, default=None, help='Maximum subdivision depth')

    return parser.parse_args(argv)


def run(args) -> List[str]:
    config = DEFAULT_CONFIG.replace(
        length_samples=getattr(args, 'samples', None),
        distance_samples=getattr(args, 'samples', None),
        intersection_tolerance=getattr(args, 'tolerance', None),
        intersection_max_depth=getattr(args, 'max_depth', None),
    )

    if args.command == 'evaluate':
        return evaluate_curve(Curve.from_points(args.points), args.t)
    elif args.command == 'split':
        return split_curve(Curve.from_points(args.points), args.t)
    elif args.command == 'length':
        return [f"{Curve.from_points(args.points).length(config.length_samples):.6g}"]
    elif args.command == 'walk':
        if args.count < 1:
            raise InvalidArgumentError(f"Count must be at least 1, got {args.count}")
        return walk_curve(Curve.from_points(args.points), args.count, config)
    elif args.command == 'intersect':
        return intersect_curves(Curve.from_points(args.curve_a), Curve.from_points(args.curve_b), config)
    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    if args.command is None:
        logging.error("Please specify a command. Use --help for more information.")
        return 1

    try:
        lines = run(args)
    except BezierError as e:
        logging.error(f"{e}")
        return 2

    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
