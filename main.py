#!/usr/bin/env python3
"""
TrendPulse - Main Entry Point

Trend discovery, short-video content planning and thumbnail generation.

Usage:
    # Start the HTTP API
    python main.py server

    # Today's trending keywords
    python main.py trends

    # Content plan for a keyword (optionally near a location)
    python main.py plan "여름 페스티벌" --lat 37.5665 --lng 126.9780

    # Thumbnail image
    python main.py thumbnail "a red bicycle" --size 2K --output thumb.png
"""

import argparse
import asyncio
import base64
import logging
import sys
from pathlib import Path
from typing import Optional
from urllib.parse import unquote

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger("trendpulse")


def start_server(host: str = "0.0.0.0", port: int = 8765):
    """Start the HTTP API."""
    import uvicorn

    logger.info(f"TrendPulse server running at http://{host}:{port}")
    uvicorn.run("services.api.server:app", host=host, port=port)


def save_data_uri(url: str, output: Path) -> Path:
    """
    Write a data: URI to disk.

    Base64 payloads are decoded as-is; the URL-encoded SVG placeholder is
    written with an .svg suffix.
    """
    header, _, payload = url.partition(",")
    if header.endswith(";base64"):
        output.write_bytes(base64.b64decode(payload))
        return output

    output = output.with_suffix(".svg")
    output.write_text(unquote(payload), encoding="utf-8")
    return output


async def show_trends():
    from services.content_studio import ContentService

    result = await ContentService().fetch_trends()
    print(f"\n=== Trends ({result.mode.value}) ===")
    for i, item in enumerate(result.value, 1):
        print(f"{i}. {item.keyword} [{item.category}] {item.volume} +{item.growth:g}%")


def parse_location(lat: Optional[float], lng: Optional[float]):
    """Build a LocationContext from CLI flags, or None when unusable."""
    from pydantic import ValidationError

    from services.content_studio import LocationContext

    if lat is None and lng is None:
        return None
    if lat is None or lng is None:
        logger.warning("Both --lat and --lng are needed for place lookup; ignoring location")
        return None

    try:
        return LocationContext(lat=lat, lng=lng)
    except ValidationError:
        logger.warning(f"Coordinate ({lat}, {lng}) is out of range; ignoring location")
        return None


async def show_plan(keyword: str, lat: Optional[float], lng: Optional[float]):
    from services.content_studio import ContentService

    location = parse_location(lat, lng)
    result = await ContentService().generate_plan(keyword, location)
    print(result.model_dump_json(by_alias=True, indent=2))


async def make_thumbnail(prompt: str, size: str, output: Path):
    from services.content_studio import ContentService, ImageSize

    result = await ContentService().generate_thumbnail(prompt, ImageSize(size))
    path = save_data_uri(result.value.url, output)
    print(f"Thumbnail ({result.mode.value}) saved to {path}")


def main():
    from core.config import get_config

    config = get_config()

    parser = argparse.ArgumentParser(
        description="TrendPulse - trend-driven short-video planning",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Server command
    server_parser = subparsers.add_parser("server", help="Start HTTP API")
    server_parser.add_argument("--host", default="0.0.0.0", help="Host to bind")
    server_parser.add_argument("--port", type=int, default=8765, help="Port to bind")

    # Trends command
    subparsers.add_parser("trends", help="Show trending keywords")

    # Plan command
    plan_parser = subparsers.add_parser("plan", help="Generate a content plan")
    plan_parser.add_argument("keyword", help="Trend keyword")
    plan_parser.add_argument("--lat", type=float, help="Latitude for nearby places")
    plan_parser.add_argument("--lng", type=float, help="Longitude for nearby places")

    # Thumbnail command
    thumb_parser = subparsers.add_parser("thumbnail", help="Generate a thumbnail")
    thumb_parser.add_argument("prompt", help="Image prompt (English works best)")
    thumb_parser.add_argument("--size", choices=["1K", "2K", "4K"], default="1K")
    thumb_parser.add_argument(
        "--output", "-o",
        type=Path,
        default=Path(config.thumbnail.default_filename),
        help="Output file",
    )

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command != "server":
        for issue in config.validate():
            logger.warning(issue)

    try:
        if args.command == "server":
            start_server(args.host, args.port)
        elif args.command == "trends":
            asyncio.run(show_trends())
        elif args.command == "plan":
            asyncio.run(show_plan(args.keyword, args.lat, args.lng))
        elif args.command == "thumbnail":
            asyncio.run(make_thumbnail(args.prompt, args.size, args.output))
    except KeyboardInterrupt:
        logger.info("Interrupted")
        sys.exit(130)


if __name__ == "__main__":
    main()
