"""
Command-line demonstration of great circle routing.

Solves the great circle path between two points, then flies the path by the
computed central angle to confirm it lands on the destination.

Usage:
    python -m great_circle.runner

    # Custom endpoints
    python -m great_circle.runner --origin 51.5 -0.1 --destination 40.7 -74.0

    # Route from a YAML config, printed to three decimals
    python -m great_circle.runner --config config/routes/valparaiso_shanghai.yaml --format F3
"""
import argparse
import sys
from pathlib import Path
from typing import List, Optional

from great_circle.core.angles import DEGREE, to_format_spec
from great_circle.core.path import GreatCirclePath
from great_circle.utils.config import (
    LOG_LEVELS,
    RouteConfig,
    get_default_config,
    load_config,
)
from great_circle.utils.exceptions import GreatCircleError
from great_circle.utils.logging_config import configure_logging, get_logger

logger = get_logger(__name__)


def run_route(config: RouteConfig) -> bool:
    """
    Solve, fly and print a route.

    Args:
        config: Validated route configuration

    Returns:
        True if the displaced point matches the destination within tolerance

    Raises:
        UnsupportedPathError: If the route is polar, meridional or antipodal
    """
    spec = to_format_spec(config.output.fmt)
    origin = config.origin.to_coordinate()
    destination = config.destination.to_coordinate()

    print(f"Coordinates of {config.origin.name}: {origin:{spec}}")
    print(f"Coordinates of {config.destination.name}: {destination:{spec}}")

    path, angle = GreatCirclePath.path_and_angle_between_points(origin, destination)
    print(f"Central angle between these points: {angle:{spec}}{DEGREE}")
    print(f"Required initial azimuth: {path.initial_azimuth:{spec}}{DEGREE}")

    target, final_azimuth = path.displace_by_angle(angle)
    print(
        f"Displacing by {angle:{spec}}{DEGREE} from {origin:{spec}} "
        f"along heading {path.initial_azimuth:{spec}}{DEGREE} gets us to "
        f"{target:{spec}} (should be {destination:{spec}})."
    )
    print(f"Final azimuth: {final_azimuth:{spec}}{DEGREE}")

    arrived = target.is_close_to(
        destination,
        relative_tolerance=config.tolerance.relative,
        absolute_tolerance=config.tolerance.absolute,
    )
    print(f"Arrived at {config.destination.name}: {'yes' if arrived else 'no'}")
    logger.info(
        "Route solved",
        origin=config.origin.name,
        destination=config.destination.name,
        central_angle=angle,
        initial_azimuth=path.initial_azimuth,
        final_azimuth=final_azimuth,
        arrived=arrived,
    )
    if not arrived:
        logger.warning("Displaced point does not match destination", target=str(target))
    return arrived


def build_config(args: argparse.Namespace) -> RouteConfig:
    """Merge command-line overrides into the configured (or default) route."""
    config = load_config(args.config) if args.config else get_default_config()

    data = config.model_dump()
    if args.origin:
        data['origin'] = {'name': "Origin", 'latitude': args.origin[0], 'longitude': args.origin[1]}
    if args.destination:
        data['destination'] = {
            'name': "Destination", 'latitude': args.destination[0], 'longitude': args.destination[1]
        }
    if args.format:
        data['output']['fmt'] = args.format
    if args.log_level:
        data['logging']['level'] = args.log_level
    if args.json_logs:
        data['logging']['json_output'] = True
    if args.log_file:
        data['logging']['file'] = args.log_file

    return RouteConfig.model_validate(data)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI."""
    parser = argparse.ArgumentParser(
        description='Great circle route between two points',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Valparaiso to Shanghai
  python -m great_circle.runner

  # London to New York, printed to three decimals
  python -m great_circle.runner --origin 51.5 -0.1 --destination 40.7 -74.0 --format F3
        """
    )

    parser.add_argument(
        '--config',
        type=Path,
        default=None,
        help='YAML route configuration (default: Valparaiso to Shanghai)'
    )

    parser.add_argument(
        '--origin',
        nargs=2,
        type=float,
        metavar=('LAT', 'LON'),
        help='Starting point in degrees N and degrees E'
    )

    parser.add_argument(
        '--destination',
        nargs=2,
        type=float,
        metavar=('LAT', 'LON'),
        help='End point in degrees N and degrees E'
    )

    parser.add_argument(
        '--format',
        default=None,
        help="Numeric format, e.g. F2 or .3f (default: from config)"
    )

    parser.add_argument(
        '--log-level',
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help='Logging level (default: from config)'
    )

    parser.add_argument(
        '--json-logs',
        action='store_true',
        help='Emit JSON logs'
    )

    parser.add_argument(
        '--log-file',
        type=Path,
        default=None,
        help='Also write logs to this file (default: from config)'
    )

    args = parser.parse_args(argv)
    # Covers config loading; replaced once the route config is resolved
    configure_logging(log_level=args.log_level or "WARNING", json_output=args.json_logs)

    try:
        config = build_config(args)
    except (GreatCircleError, FileNotFoundError, ValueError) as e:
        logger.error("Invalid configuration", error=str(e))
        return 1

    configure_logging(
        log_level=config.logging.level,
        log_file=config.logging.file,
        json_output=config.logging.json_output,
    )

    try:
        run_route(config)
        return 0
    except GreatCircleError as e:
        logger.error("Route failed", error=str(e), exc_info=True)
        return 1


if __name__ == '__main__':
    sys.exit(main())
