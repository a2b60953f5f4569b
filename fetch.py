import argparse
import json
import logging
import os
import sys

from aggregator import Aggregator
from config import Config
from playstore_service import PlayStoreSource, configure_logging

logger = logging.getLogger("PlayStoreFacade")


def print_summaries(summaries):
    print(f"\nApps ({len(summaries)}):")
    for s in summaries:
        price = "Free" if s.free else s.price
        print(f"  {s.title} [{s.app_id}]")
        print(f"    Developer: {s.developer}")
        print(f"    Rating   : {s.score_text}  Installs: {s.installs}  Price: {price}")
        if s.summary:
            print(f"    {s.summary}")


def print_installs(installs):
    print(f"\nApps ({len(installs)}):")
    for info in installs:
        print(f"  {info.app_id}")
        print(f"    Installs      : {info.installs or 'N/A'}")
        print(f"    Genre         : {info.genre or 'N/A'}")
        print(f"    Content rating: {info.content_rating or 'N/A'}")


def read_bulk_ids(path):
    with open(path, encoding="utf-8") as f:
        return [line.strip() for line in f if line.strip()]


def build_parser():
    parser = argparse.ArgumentParser(description="Google Play app metadata fetcher")
    parser.add_argument("command", choices=["apps", "ids"], help="apps: developer listing, ids: install info by app id")
    parser.add_argument("app_ids", nargs="*", help="Play Store app ids (for 'ids')")
    parser.add_argument("--bulk", help="Path to file containing list of app IDs (one per line)")
    parser.add_argument("--json", action="store_true", help="Print raw JSON output")
    parser.add_argument("--output", help="Write a status/data JSON result to this file")
    parser.add_argument("--quiet", action="store_true", help="Suppress non-error output")
    return parser


def run(args, aggregator):
    if args.command == "apps":
        items = aggregator.developer_app_summaries()
        printer = print_summaries
    else:
        app_ids = list(args.app_ids)
        if args.bulk:
            if not os.path.exists(args.bulk):
                raise FileNotFoundError(f"Bulk file '{args.bulk}' does not exist.")
            app_ids.extend(read_bulk_ids(args.bulk))
        items = aggregator.fetch_apps_by_ids(app_ids)
        printer = print_installs

    data = [item.to_dict() for item in items]
    if args.json:
        print(json.dumps(data, indent=2, ensure_ascii=False))
    elif not args.quiet:
        printer(items)
    return data


def cli(argv=None, aggregator=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command == "apps" and (args.app_ids or args.bulk):
        parser.error("'apps' takes no app ids or --bulk file")
    config = Config.from_env()
    configure_logging(config.log_dir, quiet=args.quiet)

    if aggregator is None:
        aggregator = Aggregator(config, PlayStoreSource(timeout=config.request_timeout))

    try:
        result = {"status": "success", "data": run(args, aggregator)}
        exit_code = 0
    except Exception as e:
        logger.error(f"❌ Failed to run '{args.command}': {e}")
        result = {"status": "error", "message": str(e)}
        exit_code = 1

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            json.dump(result, f, indent=2, ensure_ascii=False)
        if not args.quiet:
            print(f"Result written to {args.output}")

    return exit_code


if __name__ == "__main__":
    sys.exit(cli())
