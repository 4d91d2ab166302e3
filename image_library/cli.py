import argparse
import asyncio
import logging
import sys
from typing import Optional

import httpx
from pydantic import ValidationError

from image_library.models.client_config import get_config
from image_library.models.image import Image, NewImageData
from image_library.services.errors import ClientError
from image_library.services.library_client import LibraryClient
from image_library.utils.version import version


def main(args, transport: Optional[httpx.AsyncBaseTransport] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(args)
    if args.timeout is not None and args.timeout <= 0:
        parser.error("--timeout must be greater than 0")
    try:
        config = get_config()
    except ValidationError as exc:
        print(f"error: invalid configuration: {exc}", file=sys.stderr)
        return 1
    logging.basicConfig(level=config.log_level, format="%(asctime)s %(levelname)s %(message)s")
    try:
        print(asyncio.run(run_command(args, transport)))
    except ClientError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="image-library", description="Talk to a running image library service")
    parser.add_argument("--version", action="version", version=version())
    parser.add_argument("-u", "--url", help="Base address of the image library", type=str, default=None)
    parser.add_argument("-t", "--timeout", help="Request timeout in seconds", type=float, default=None)
    commands = parser.add_subparsers(dest="command", required=True)

    add = commands.add_parser("add", help="Create a new image record and print its id")
    _add_record_arguments(add)

    get = commands.add_parser("get", help="Print an image record as JSON")
    get.add_argument("image_id", type=int)

    update = commands.add_parser("update", help="Replace an image record and print its id")
    update.add_argument("image_id", type=int)
    _add_record_arguments(update)
    return parser


def _add_record_arguments(parser: argparse.ArgumentParser):
    parser.add_argument("--user-id", type=int, required=True)
    parser.add_argument("--raw-id", type=str, default=None)
    parser.add_argument("--sidecar-id", type=str, default=None)
    parser.add_argument("--image-id", dest="image_ref", type=str, default=None)


async def run_command(args: argparse.Namespace, transport: Optional[httpx.AsyncBaseTransport] = None) -> str:
    config = get_config()
    base_url = config.library_url if args.url is None else args.url
    timeout = config.request_timeout if args.timeout is None else args.timeout
    async with httpx.AsyncClient(transport=transport) as http:
        client = LibraryClient(base_url, http, timeout=timeout)
        if args.command == "add":
            data = NewImageData(
                raw_id=args.raw_id, sidecar_id=args.sidecar_id, image_id=args.image_ref, user_id=args.user_id
            )
            return str(await client.add_image(data))
        if args.command == "get":
            image = await client.get_image(args.image_id)
            return image.model_dump_json(indent=2)
        image = Image(
            id=args.image_id,
            raw_id=args.raw_id,
            sidecar_id=args.sidecar_id,
            image_id=args.image_ref,
            user_id=args.user_id,
        )
        return str(await client.update_image(image))


def run():
    sys.exit(main(sys.argv[1:]))


if __name__ == "__main__":
    run()
