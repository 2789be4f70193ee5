from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

import uvicorn
from dotenv import load_dotenv

from hotelmerge.app import build_hotel_service
from hotelmerge.config import configure_logging, get_service_config
from hotelmerge.domain.filtering import NO_DESTINATION, parse_filter_params
from hotelmerge.ui.http import create_app

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from hotelmerge.domain.model import Hotel
    from hotelmerge.domain.service import HotelQueryService

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Query and serve reconciled hotel data")
    subparsers = parser.add_subparsers(dest="command", required=True)

    query = subparsers.add_parser("query", help="Fetch, merge and print hotels as JSON")
    query.add_argument(
        "--hotels",
        type=str,
        help="Comma separated hotel ids to return",
    )
    query.add_argument(
        "--destination",
        type=str,
        help="Non-negative destination id to restrict results to",
    )

    serve = subparsers.add_parser("serve", help="Run the HTTP API")
    serve.add_argument(
        "--host",
        type=str,
        default="127.0.0.1",
        help="Interface to bind (default: 127.0.0.1)",
    )
    serve.add_argument(
        "--port",
        type=int,
        default=8080,
        help="Port to listen on (default: 8080)",
    )

    return parser.parse_args(list(argv))


async def _query(
    service: HotelQueryService,
    hotel_ids: list[str],
    destination_id: int,
) -> list[Hotel]:
    try:
        return await service.get_hotels(hotel_ids, destination_id)
    finally:
        await service.aclose()


def _run_query(service: HotelQueryService, hotel_ids: list[str], destination_id: int) -> None:
    hotels = asyncio.run(_query(service, hotel_ids, destination_id))
    json.dump([hotel.to_dict() for hotel in hotels], sys.stdout, indent=2)
    sys.stdout.write("\n")


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        parsed_args = _parse_args(args_list)
        hotel_ids, destination_id = (
            parse_filter_params(parsed_args.hotels, parsed_args.destination)
            if parsed_args.command == "query"
            else ([], NO_DESTINATION)
        )
    except ValueError:
        configure_logging()
        log.exception("CLI validation error")
        sys.exit(2)

    try:
        config = get_service_config()
        configure_logging(level=config.log_level)
        service = build_hotel_service(config)
        if parsed_args.command == "query":
            _run_query(service, hotel_ids, destination_id)
        elif parsed_args.command == "serve":
            uvicorn.run(create_app(service), host=parsed_args.host, port=parsed_args.port)
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301
    except Exception:
        log.exception("Fatal error")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
