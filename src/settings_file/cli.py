"""CLI rendering a settings file as command line flags."""

from __future__ import annotations

import argparse
import json
import sys

from .arguments import to_arguments
from .config import ParserConfig
from .logging_utils import configure_logging
from .parser import SettingFileParser
from .values import plain


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="settings-file", description="Render a settings file as CLI flags")
    parser.add_argument("path", help="Path to the settings file")
    parser.add_argument("--sort", action="store_true", help="Sort flags by setting name")
    parser.add_argument("--json", action="store_true", help="Print settings as a JSON object instead")
    parser.add_argument("--strict", action="store_true", help="Fail when the settings file is missing")
    parser.add_argument("--log-level", default=None, help="Logging level (default from environment)")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    config = ParserConfig()
    if args.strict:
        config.missing_ok = False
    if args.sort:
        config.sort_arguments = True
    if args.log_level:
        config.logging.level = args.log_level
    configure_logging(config.logging)

    settings_parser = SettingFileParser(config)
    try:
        settings = settings_parser.load(args.path)
    except FileNotFoundError as exc:
        print(f"settings file not found: {exc.filename}", file=sys.stderr)
        return 1

    if args.json:
        names = sorted(settings) if config.sort_arguments else list(settings)
        print(json.dumps({name: plain(settings.get(name)) for name in names}, default=str))
    else:
        for argument in to_arguments(settings, sort_keys=config.sort_arguments):
            print(argument)
    return 0


if __name__ == "__main__":
    sys.exit(main())
