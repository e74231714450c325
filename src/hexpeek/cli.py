from __future__ import annotations

import argparse
import logging
import sys

from hexpeek.core.config import load_config
from hexpeek.core.errors import ConfigError, StartupError
from hexpeek.core.io import open_buffer

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="hexpeek", description="hexpeek binary viewer (Textual)")
    parser.add_argument("path", help="Path to binary file")
    parser.add_argument(
        "--endian",
        choices=["little", "big"],
        default=None,
        help="initial byte order for scalar decoding (default: little)",
    )
    parser.add_argument(
        "--bytes-per-row",
        type=int,
        default=None,
        help="bytes shown per hex row (default: 16)",
    )
    parser.add_argument("--config", default=None, help="YAML config file")
    parser.add_argument("--log-file", default=None, help="write debug log to this file")
    parser.add_argument("-v", "--verbose", action="store_true", help="log at DEBUG level")
    return parser


def configure_logging(log_file: str | None, verbose: bool) -> None:
    # Nothing goes to the terminal while the TUI owns it
    if log_file is None:
        return
    logging.basicConfig(
        filename=log_file,
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_file, args.verbose)

    try:
        config = load_config(args.config).with_overrides(
            endian=args.endian, bytes_per_row=args.bytes_per_row
        )
        reader = open_buffer(args.path)
    except (ConfigError, StartupError) as exc:
        logger.error("startup failed: %s", exc)
        print(f"hexpeek: {exc}", file=sys.stderr)
        return 2

    # Imported late so startup errors do not pay for loading Textual
    from hexpeek.app import HexpeekApp

    app = HexpeekApp(args.path, config, reader=reader)
    app.run()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
