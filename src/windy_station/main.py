"""Command line entry point for uploading station data to Windy."""

import argparse
import asyncio
import logging
import sys
from datetime import datetime
from typing import NoReturn

from pydantic import ValidationError

from . import __version__
from .clients import WindyStationClient
from .config import Settings, get_settings
from .exceptions import WindyStationError
from .schemas import Observation, Station, StationVisibility

logger = logging.getLogger(__name__)

VISIBILITY_CHOICES = {
    "open": StationVisibility.OPEN,
    "only-windy": StationVisibility.ONLY_WINDY,
    "private": StationVisibility.PRIVATE,
}


def setup_logging(level: str = "INFO") -> None:
    """Configure logging for the application."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    # Reduce noise from httpx, its request log line carries the API key
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 timestamp that includes a UTC offset."""
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid ISO-8601 timestamp: {value}") from None
    if parsed.tzinfo is None:
        raise argparse.ArgumentTypeError(f"timestamp needs a UTC offset: {value}")
    return parsed


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Windy Station - upload personal weather station data",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Register a station
  windy-station register --station-id 0 --visibility open --name backyard \\
      --latitude 49.28273 --longitude -123.120735 --elevation 62 \\
      --temp-height 1 --wind-height 2

  # Record a reading for the default station
  windy-station observe --temp -1.2 --rh 99

Environment Variables:
  WINDY_API_KEY           Station API key (or pass --api-key)
  WINDY_BASE_URL          Update endpoint (default: https://stations.windy.com/pws/update)
  WINDY_TIMEOUT_SECONDS   HTTP timeout (default: 30)
        """,
    )

    parser.add_argument("--api-key", help="Windy station API key (default: $WINDY_API_KEY)")
    parser.add_argument("--base-url", help="Override the update endpoint URL")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: $LOG_LEVEL or INFO)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    register = subparsers.add_parser("register", help="Register a station")
    register.add_argument("--station-id", type=int, required=True)
    register.add_argument("--visibility", choices=list(VISIBILITY_CHOICES), required=True)
    register.add_argument("--name", required=True)
    register.add_argument("--latitude", type=float, required=True)
    register.add_argument("--longitude", type=float, required=True)
    register.add_argument("--elevation", type=int, required=True, help="Meters above sea level")
    register.add_argument("--temp-height", type=int, required=True, help="Meters")
    register.add_argument("--wind-height", type=int, required=True, help="Meters")

    observe = subparsers.add_parser("observe", help="Record one observation")
    observe.add_argument("--station-id", type=int, help="Default: the account's station")
    observe.add_argument("--time", type=parse_timestamp, help="Default: server receipt time")
    observe.add_argument("--temp", type=float, help="Air temperature, °C")
    observe.add_argument("--wind", type=float, help="Wind speed, m/s")
    observe.add_argument("--winddir", type=int, help="Wind direction, degrees")
    observe.add_argument("--gust", type=float, help="Wind gust, m/s")
    observe.add_argument("--rh", type=float, help="Relative humidity, %%")
    observe.add_argument("--dewpoint", type=float, help="Dew point, °C")
    observe.add_argument("--pressure", type=float, help="Pressure, Pa")
    observe.add_argument("--precip", type=float, help="Precipitation over the past hour, mm")
    observe.add_argument("--uv", type=int, help="UV index")

    return parser.parse_args()


def build_station(args: argparse.Namespace) -> Station:
    """Build a Station from ``register`` arguments."""
    return Station(
        id=args.station_id,
        visibility=VISIBILITY_CHOICES[args.visibility],
        name=args.name,
        latitude=args.latitude,
        longitude=args.longitude,
        elevation=args.elevation,
        temp_height=args.temp_height,
        wind_height=args.wind_height,
    )


def build_observation(args: argparse.Namespace) -> Observation:
    """Build an Observation from ``observe`` arguments, leaving unset flags absent."""
    return Observation(
        station_id=args.station_id,
        time=args.time,
        temperature=args.temp,
        wind_speed=args.wind,
        wind_direction=args.winddir,
        wind_gust=args.gust,
        relative_humidity=args.rh,
        dew_point=args.dewpoint,
        pressure=args.pressure,
        precipitation=args.precip,
        uv_index=args.uv,
    )


async def run_command(args: argparse.Namespace, settings: Settings) -> int:
    """Run the selected subcommand.

    Returns:
        Process exit status.
    """
    api_key = args.api_key or settings.windy.api_key
    if not api_key:
        logger.error("No API key. Set WINDY_API_KEY or pass --api-key")
        return 1

    try:
        if args.command == "register":
            payload = build_station(args)
        else:
            payload = build_observation(args)
    except ValidationError as e:
        logger.error("Invalid %s arguments: %s", args.command, e)
        return 1

    async with WindyStationClient(
        api_key, config=settings.windy, base_url=args.base_url
    ) as client:
        try:
            if isinstance(payload, Station):
                await client.register_stations([payload])
                logger.info("Registered station %d (%s)", payload.id, payload.name)
            else:
                await client.record_observations([payload])
                logger.info("Recorded observation")
        except WindyStationError as e:
            logger.error("%s", e)
            return 1

    return 0


def main() -> NoReturn:
    """Main entry point."""
    args = parse_args()
    settings = get_settings()

    setup_logging(args.log_level or settings.log_level)

    sys.exit(asyncio.run(run_command(args, settings)))


if __name__ == "__main__":
    main()
