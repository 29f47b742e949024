from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from concordance_transformer.adapters.messages import new_transaction_id
from concordance_transformer.app import (
    build_writer_client,
    check_writer,
    handle_concordance_event,
    process_message,
    transform_concordance,
)
from concordance_transformer.config import ConfigurationError, configure_logging, get_log_level
from concordance_transformer.domain import WriterUnavailableError

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from concordance_transformer.app import EventOutcome

log = logging.getLogger(__name__)

STDIN_PATH = "-"


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Transform taxonomy concept exports into concordance records"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    transform = subparsers.add_parser(
        "transform",
        help="Print the concordance record for a concept payload",
    )
    transform.add_argument(
        "path",
        type=str,
        help="JSON-LD payload file, or '-' to read from stdin",
    )

    send = subparsers.add_parser("send", help="Forward a concept payload to the concordance writer")
    send.add_argument(
        "path",
        type=str,
        help="Payload file, or '-' to read from stdin",
    )
    send.add_argument(
        "--transaction-id",
        type=str,
        help=(
            "Transaction id sent as X-Request-Id (generated when omitted). With --message it "
            "is used only when the envelope has no X-Request-Id header"
        ),
    )
    send.add_argument(
        "--message",
        action="store_true",
        help="Treat the input as an FT message envelope with headers",
    )

    subparsers.add_parser("check-writer", help="Check connectivity to the concordance writer")

    return parser.parse_args(list(argv))


def _read_input(path: str) -> str:
    if path == STDIN_PATH:
        return sys.stdin.read()
    try:
        return Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise ValueError(f"Cannot read payload from {path}: {exc}") from exc


def _exit_for(outcome: EventOutcome) -> None:
    if outcome.ok:
        return
    log.error(f"Payload rejected ({outcome.status}, HTTP {outcome.http_status}): {outcome.error}")
    sys.exit(1)


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    try:
        configure_logging(level=get_log_level())
    except ConfigurationError:
        configure_logging()
        log.exception("Invalid logging configuration")
        sys.exit(2)

    parsed_args: argparse.Namespace
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        parsed_args = _parse_args(args_list)
        payload = _read_input(parsed_args.path) if parsed_args.command != "check-writer" else ""
    except ValueError:
        log.exception("CLI validation error")
        sys.exit(2)

    try:
        if parsed_args.command == "transform":
            outcome = transform_concordance(payload, new_transaction_id())
            _exit_for(outcome)
            if outcome.concordance is not None:
                sys.stdout.write(outcome.concordance.to_json().decode("utf-8") + "\n")
        elif parsed_args.command == "send":
            with build_writer_client() as writer:
                if parsed_args.message:
                    outcome = process_message(
                        payload,
                        writer=writer,
                        transaction_id=parsed_args.transaction_id,
                    )
                else:
                    tid = parsed_args.transaction_id or new_transaction_id()
                    outcome = handle_concordance_event(payload, tid, writer=writer)
            _exit_for(outcome)
            log.info(f"Concordance event finished with status {outcome.status}")
        elif parsed_args.command == "check-writer":
            log.info(check_writer())

    except WriterUnavailableError:
        log.exception("Concordance writer is unavailable")
        sys.exit(1)
    except ConfigurationError:
        log.exception("Invalid configuration")
        sys.exit(2)
    except Exception:
        log.exception("Fatal error while handling the payload")
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
