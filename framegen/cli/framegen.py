"""Command-line entry point for building frame bundles."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from framegen.bundle.builder import BundleConfig, FrameBundleBuilder
from framegen.config import FramegenSettings, load_settings
from framegen.errors import FrameBundleError

PROG = "framegen"

_HANDLER_NAME = "framegen-cli"


class _ArgumentParser(argparse.ArgumentParser):
    """Argument parser that reports usage errors with exit status 1."""

    def error(self, message: str) -> None:  # type: ignore[override]
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        settings = _load_settings(args.env_file)
    except FrameBundleError as exc:
        _report(exc)
        return 1

    _configure_logging(logging.DEBUG if args.verbose else settings.logging_level)

    manifest = args.manifest or settings.manifest_path
    config = BundleConfig(
        frames_dir=Path(args.frames_dir),
        output_path=Path(args.output_file),
        manifest_path=Path(manifest) if manifest else None,
        atomic_write=settings.atomic_write and not args.no_atomic,
    )

    try:
        result = FrameBundleBuilder().build(config)
    except FrameBundleError as exc:
        _report(exc)
        return 1

    for line in result.logs:
        logging.getLogger("framegen").info(line)
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog=PROG,
        description="Pack a directory of .txt frames into a raw DEFLATE bundle.",
    )
    parser.add_argument("frames_dir", help="Directory containing .txt frame files.")
    parser.add_argument("output_file", help="Bundle file to create or overwrite.")
    parser.add_argument("--manifest", help="Also write a JSON manifest describing the bundle.")
    parser.add_argument(
        "--no-atomic",
        action="store_true",
        help="Write the output file in place instead of renaming a temporary file.",
    )
    parser.add_argument("--env-file", help="Read FRAMEGEN_* settings from this dotenv file.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log each pipeline stage.")
    return parser


def _load_settings(env_file: Optional[str]) -> FramegenSettings:
    if env_file:
        return load_settings(Path(env_file))
    local_env = Path.cwd() / ".env"
    return load_settings(local_env if local_env.is_file() else None)


def _configure_logging(level: int) -> None:
    logger = logging.getLogger("framegen")
    for handler in list(logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(f"{PROG}: %(levelname)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False


def _report(exc: FrameBundleError) -> None:
    print(f"{PROG}: error: {exc}", file=sys.stderr)
