from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from pubrecon.adapters.manifest import load_publish_batch
from pubrecon.adapters.webhook import WebhookNotifier
from pubrecon.app import initialise_database, process_publish_batch
from pubrecon.config import ConfigurationError, WebhookConfig, configure_logging

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Reconcile publish batches into changed items")
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    reconcile = subparsers.add_parser("reconcile", help="Reconcile a batch manifest")
    reconcile.add_argument("manifest", type=Path, help="Path to a JSON batch manifest")
    reconcile.add_argument(
        "--database-uri",
        type=str,
        help="SQLAlchemy URI of the item stores (defaults to config)",
    )
    reconcile.add_argument(
        "--max-workers",
        type=int,
        help="Number of entities to reconcile concurrently (defaults to config)",
    )
    reconcile.add_argument(
        "--webhook-url",
        type=str,
        help="Post changed items to this URL instead of the configured notifier",
    )

    init_db = subparsers.add_parser("init-db", help="Create the item store tables")
    init_db.add_argument(
        "--database-uri",
        type=str,
        help="SQLAlchemy URI of the item stores (defaults to config)",
    )
    return parser.parse_args(list(argv))


def _run_reconcile(args: argparse.Namespace) -> None:
    if args.max_workers is not None and args.max_workers < 1:
        raise ValueError("--max-workers must be at least 1")
    batch = load_publish_batch(args.manifest)
    notifier = None
    if args.webhook_url:
        notifier = WebhookNotifier(config=WebhookConfig(url=args.webhook_url))
    result = process_publish_batch(
        batch,
        notifier=notifier,
        max_workers=args.max_workers,
        database_uri=args.database_uri,
    )
    print(  # noqa: T201
        f"changed={len(result.items)} unresolved={len(result.unresolved)} "
        f"failed={len(result.failed)}"
    )


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    try:
        parsed_args = _parse_args(sys.argv[1:] if argv is None else argv)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)  # noqa: T201
        sys.exit(2)

    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)

    try:
        if parsed_args.command == "init-db":
            uri = initialise_database(database_uri=parsed_args.database_uri)
            log.info("Initialised item store tables at %s", uri)
            return
        _run_reconcile(parsed_args)
    except (ValueError, ConfigurationError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)  # noqa: T201
        sys.exit(2)
    except Exception as exc:  # noqa: BLE001
        print(f"Error: {exc}", file=sys.stderr)  # noqa: T201
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    print("\nClosed by user (Ctrl+C)")  # noqa: T201
    sys.exit(0)


def run() -> None:
    """Console script entry point."""
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
