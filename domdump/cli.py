"""Command-line interface for domdump."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Iterable, Optional
from xml.parsers.expat import ExpatError

from .dump import dump_markup, verify_fixed_point
from .io_utils import load_config, read_markup, warn, write_text
from .models import DumpConfig


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Parse markup and dump the resulting DOM as markup")
    parser.add_argument(
        "--input",
        default="-",
        help="Markup file to dump; '-' (default) reads stdin",
    )
    parser.add_argument("--out", type=Path, help="Write the dump here instead of stdout")
    parser.add_argument("--config", type=Path, help="YAML file with dump settings")
    parser.add_argument(
        "--parser",
        choices=["html.parser", "xml"],
        help="Tree provider (overrides the config file)",
    )
    parser.add_argument(
        "--no-xhtml",
        action="store_true",
        help="Leave elements without a namespace instead of placing them in XHTML",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Dump the dump again and fail if the second pass differs from the first",
    )
    return parser


def _effective_config(args: argparse.Namespace) -> DumpConfig:
    config = load_config(args.config)
    overrides: dict = {}
    if args.parser:
        overrides["parser"] = args.parser
    if args.no_xhtml:
        overrides["assume_xhtml"] = False
    if overrides:
        config = config.model_copy(update=overrides)
    return config


def main(argv: Optional[Iterable[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    config = _effective_config(args)

    markup = read_markup(args.input, encoding=config.encoding)
    try:
        output = dump_markup(markup, config)
    except ExpatError as exc:
        raise SystemExit(f"Invalid XML in {args.input}: {exc}") from exc

    if args.out:
        write_text(args.out, output, encoding=config.encoding)
        warn(f"Wrote DOM dump to {args.out}")
    else:
        sys.stdout.write(output)
        sys.stdout.flush()

    if args.check:
        ok, diff = verify_fixed_point(markup, config, first=output)
        if not ok:
            sys.stderr.write(diff)
            sys.exit(1)


if __name__ == "__main__":
    main()
