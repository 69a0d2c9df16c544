from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from podwire.adapters.manifest import ManifestError, load_targets
from podwire.app import integrate_targets
from podwire.config import (
    ConfigurationError,
    configure_logging,
    get_cli_config,
    require_manifest_path,
)

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Integrate Pods products into user projects")
    subparsers = parser.add_subparsers(dest="command", required=True)

    integrate = subparsers.add_parser(
        "integrate",
        help="Wire every target of a manifest into its user project",
    )
    integrate.add_argument(
        "manifest",
        type=Path,
        nargs="?",
        help="Path to the JSON target manifest (defaults to $PODWIRE_MANIFEST)",
    )
    integrate.add_argument(
        "--log-level",
        type=str,
        help="Logging level: DEBUG, INFO, WARNING or ERROR (defaults to $PODWIRE_LOG_LEVEL)",
    )

    return parser.parse_args(list(argv))


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        parsed_args = _parse_args(args_list)
        config = get_cli_config(log_level=parsed_args.log_level)
    except ConfigurationError:
        configure_logging()
        log.exception("CLI validation error")
        sys.exit(2)

    configure_logging(level=config.log_level)

    try:
        manifest_path = require_manifest_path(parsed_args.manifest)
        targets = load_targets(manifest_path)
    except (ConfigurationError, ManifestError):
        log.exception("CLI validation error")
        sys.exit(2)

    try:
        if parsed_args.command == "integrate":
            results = integrate_targets(targets)
            dirty = [result.target_name for result in results if result.dirty]
            log.info("Updated targets: %s", ", ".join(dirty) if dirty else "none")
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301

    except Exception:
        log.exception("Fatal error during integration")
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
