import argparse
import asyncio
import json
import logging
import os
import sys
import httpx
from dotenv import load_dotenv

from core.http_client import FetchError, HTTPClient
from core.models import MetadataRecord
from core.store import StoreError, append_record
from extractors.opengraph import extract_metadata

logger = logging.getLogger(__name__)

USAGE_NOTES = (
    'The target JSON file must follow the structure: {"articles":[{...}]}\n'
    "A backup of the original file will be created before modification."
)


def setup_logging():
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="og-extractor",
        description="Extract Open Graph metadata from a web page and append it to a JSON file.",
        epilog=USAGE_NOTES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("url", help="URL of the web page to extract Open Graph metadata from")
    parser.add_argument("json_file_path", help="Path to the target JSON file to append the metadata to")
    return parser


def print_metadata(record: MetadataRecord):
    print(json.dumps(record.to_dict(), indent=2, ensure_ascii=False))


async def main(url: str, json_file_path: str) -> int:
    async with HTTPClient() as http:
        try:
            record = await extract_metadata(url, http)
        except (FetchError, httpx.HTTPError, httpx.InvalidURL) as e:
            print(f"Error extracting metadata: {e}", file=sys.stderr)
            return 1

    try:
        append_record(record, json_file_path)
    except StoreError as e:
        print(f"Error appending to JSON file: {e}", file=sys.stderr)
        return 1

    print_metadata(record)
    print(f"\nSuccessfully appended to {json_file_path}")
    return 0


def run(argv=None):
    args = build_parser().parse_args(argv)
    load_dotenv()
    setup_logging()
    sys.exit(asyncio.run(main(args.url, args.json_file_path)))


if __name__ == "__main__":
    run()
