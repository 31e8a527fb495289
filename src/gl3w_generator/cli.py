"""Command line interface for the gl3w generator."""

import argparse
import sys
from pathlib import Path
from typing import Optional

from .codegen import write_outputs
from .errors import GeneratorError
from .fetch import fetch_spec
from .registry import ProcRegistry
from .types import (
    DEFAULT_CACHE_PATH,
    DEFAULT_HEADER_PATH,
    DEFAULT_PREFIX,
    DEFAULT_SOURCE_PATH,
    DEFAULT_URL,
    GeneratorConfig,
    OutputTarget,
    SeparateTarget,
    SingleTarget,
)


def run(config: GeneratorConfig) -> list[Path]:
    """Fetch glcorearb.h, extract its functions and write the loader files."""
    spec_text = fetch_spec(config)

    print("Parsing glcorearb.h...")
    registry = ProcRegistry(config.prefix)
    registry.parse_procs(spec_text)

    for name in registry.skipped:
        print(f"warning: skipping malformed identifier {name!r}")

    symbols = registry.sorted_procs()
    written = write_outputs(config.target, symbols)

    print(f"Generated loader for {len(symbols)} OpenGL functions")
    return written


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate the gl3w OpenGL loader")
    parser.add_argument(
        "--url", default=DEFAULT_URL, help=f"Where to download glcorearb.h from (default: {DEFAULT_URL})"
    )
    parser.add_argument(
        "--cache",
        type=Path,
        default=DEFAULT_CACHE_PATH,
        help=f"Cached copy of glcorearb.h (default: {DEFAULT_CACHE_PATH})",
    )
    parser.add_argument(
        "--no-cache",
        action="store_true",
        help="Download glcorearb.h even if a cached copy exists",
    )
    parser.add_argument(
        "--header",
        type=Path,
        default=None,
        help=f"Output header path (default: {DEFAULT_HEADER_PATH})",
    )
    parser.add_argument(
        "--source",
        type=Path,
        default=None,
        help=f"Output source path (default: {DEFAULT_SOURCE_PATH})",
    )
    parser.add_argument(
        "--single",
        type=Path,
        default=None,
        help="Write one combined header instead of a .h/.c pair",
    )
    parser.add_argument(
        "--prefix",
        default=DEFAULT_PREFIX,
        help=f"Prefix of the loader function pointers (default: {DEFAULT_PREFIX})",
    )
    parser.add_argument(
        "--timeout", type=float, default=None, help="Network timeout in seconds"
    )
    return parser


def config_from_args(args: argparse.Namespace) -> GeneratorConfig:
    target: OutputTarget
    if args.single is not None:
        target = SingleTarget(args.single)
    else:
        target = SeparateTarget(
            args.header or DEFAULT_HEADER_PATH, args.source or DEFAULT_SOURCE_PATH
        )

    return GeneratorConfig(
        url=args.url,
        cache_path=args.cache,
        target=target,
        no_cache=args.no_cache,
        prefix=args.prefix,
        timeout=args.timeout,
    )


def main(argv: Optional[list[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.single is not None and (args.header is not None or args.source is not None):
        parser.error("--single cannot be combined with --header or --source")

    config = config_from_args(args)

    try:
        run(config)
    except (GeneratorError, OSError) as e:
        print(f"error: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
