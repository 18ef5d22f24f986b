"""Command line interface for privacy-filter.

Usage:
    # Full analysis as JSON
    echo 'Mail me at john@x.com' | privacy-filter analyze

    # Gated filter (honours ENABLE_PRIVACY_FILTER unless --force)
    privacy-filter filter --force --text 'Call (555) 123-4567'

    # Exit status 0 when the text is safe to post, 1 otherwise
    privacy-filter check --file draft.txt

    # Risk and advice without matched values
    privacy-filter suggest --file draft.txt
"""
import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from privacy_filter.config import PrivacyFilterConfig
from privacy_filter.engine import PrivacyEngine
from privacy_filter.types import FilterOptions


def _build_engine(args: argparse.Namespace) -> PrivacyEngine:
    config = PrivacyFilterConfig.from_env()
    if args.names:
        config.detect_possible_names = True
    if args.ai:
        return PrivacyEngine.from_env(config)
    return PrivacyEngine(config=config)


def _read_text(args: argparse.Namespace) -> str:
    if args.text is not None:
        return args.text
    if args.file:
        return Path(args.file).read_text(encoding="utf-8")
    return sys.stdin.read()


def _emit(data: dict) -> None:
    json.dump(data, sys.stdout, indent=2, ensure_ascii=False)
    sys.stdout.write("\n")


def cmd_analyze(args: argparse.Namespace) -> int:
    """Print the full analysis."""
    result = _build_engine(args).analyze(_read_text(args))
    _emit(result.to_dict())
    return 0


def cmd_filter(args: argparse.Namespace) -> int:
    """Print the gated filter result."""
    options = FilterOptions(enable_filter=not args.disable, force_filter=args.force)
    result = _build_engine(args).filter_content(_read_text(args), options)
    _emit(result.to_dict())
    return 0


def cmd_check(args: argparse.Namespace) -> int:
    """Exit 0 when safe, 1 otherwise."""
    analysis = _build_engine(args).analyze(_read_text(args))
    _emit({"safe": analysis.is_safe, "risk_level": analysis.risk_level.value})
    return 0 if analysis.is_safe else 1


def cmd_suggest(args: argparse.Namespace) -> int:
    """Print risk level and advice only."""
    report = _build_engine(args).suggestions_only(_read_text(args))
    _emit(report.to_dict())
    return 0


def _add_input_args(parser: argparse.ArgumentParser) -> None:
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--text", help="Text to scan (default: stdin)")
    group.add_argument("--file", help="UTF-8 file to scan")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="privacy-filter",
        description="Detect and redact sensitive information before posting",
    )
    parser.add_argument("--ai", action="store_true", help="Use the OpenAI oracle (needs OPENAI_API_KEY)")
    parser.add_argument("--names", action="store_true", help="Flag capitalized word pairs as names")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr")

    sub = parser.add_subparsers(dest="command", required=True)
    _add_input_args(sub.add_parser("analyze", help="Full analysis as JSON"))
    filter_parser = sub.add_parser("filter", help="Gated filter as JSON")
    _add_input_args(filter_parser)
    filter_parser.add_argument("--force", action="store_true", help="Filter even if disabled by config")
    filter_parser.add_argument("--disable", action="store_true", help="Skip filtering for this call")
    _add_input_args(sub.add_parser("check", help="Exit 1 unless the text is safe"))
    _add_input_args(sub.add_parser("suggest", help="Risk level and advice only"))

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    cmds = {
        "analyze": cmd_analyze,
        "filter": cmd_filter,
        "check": cmd_check,
        "suggest": cmd_suggest,
    }
    return cmds[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
