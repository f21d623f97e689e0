"""Command line interface for the globmatch pattern matcher."""
from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from . import io
from .engine.matcher import filter_texts, match
from .engine.models import FilterMode
from .engine.validator import check

logger = logging.getLogger(__name__)


def _configure_logging(verbosity: int) -> None:
    """Map ``-v`` repetitions onto a root logging level."""
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="globmatch", description="Glob-style pattern matching CLI")
    parser.add_argument("-V", "--version", action="version", version="globmatch 0.1")
    parser.add_argument("-v", "--verbose", action="count", default=0)
    sub = parser.add_subparsers(dest="command", required=True)

    match_cmd = sub.add_parser("match", help="match texts against one pattern")
    match_cmd.add_argument("pattern")
    match_cmd.add_argument("texts", nargs="+")
    match_cmd.add_argument("--strict", action="store_true", default=False, help="validate the pattern first")
    match_cmd.add_argument("--format", choices=["text", "json"], default="text")
    match_cmd.add_argument("--out", default="-")

    validate_cmd = sub.add_parser("validate", help="check pattern syntax")
    validate_cmd.add_argument("patterns", nargs="+")
    validate_cmd.add_argument("--format", choices=["text", "json"], default="text")

    filter_cmd = sub.add_parser("filter", help="keep texts accepted by a pattern list")
    filter_cmd.add_argument("--patterns", required=True)
    filter_cmd.add_argument("--texts", required=True)
    filter_cmd.add_argument("--mode", choices=[mode.value for mode in FilterMode], default=FilterMode.ANY.value)
    filter_cmd.add_argument("--strict", action="store_true", default=False, help="validate every pattern first")
    filter_cmd.add_argument("--format", choices=["text", "json"], default="text")
    filter_cmd.add_argument("--out", default="-")
    return parser


def _ensure_valid(parser: argparse.ArgumentParser, patterns: Sequence[str]) -> None:
    for pattern in patterns:
        error = check(pattern)
        if error is not None:
            parser.error(str(error))


def _command_match(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    if args.strict:
        _ensure_valid(parser, [args.pattern])
    results = [(text, match(args.pattern, text)) for text in args.texts]
    if args.format == "json":
        payload = [{"text": text, "matched": ok} for text, ok in results]
        io.write_json({"pattern": args.pattern, "results": payload}, args.out)
    else:
        lines = [f"{text}\t{'true' if ok else 'false'}" for text, ok in results]
        io.write_text("\n".join(lines) + "\n", args.out)
    return 0 if all(ok for _, ok in results) else 1


def _command_validate(args: argparse.Namespace) -> int:
    errors = [(pattern, check(pattern)) for pattern in args.patterns]
    if args.format == "json":
        payload = [
            {
                "pattern": pattern,
                "valid": error is None,
                "error": error.kind.value if error else None,
                "position": error.position if error else None,
            }
            for pattern, error in errors
        ]
        io.write_json(payload, "-")
    else:
        lines = []
        for pattern, error in errors:
            if error is None:
                lines.append(f"{pattern}\tok")
            else:
                lines.append(f"{pattern}\t{error.kind.value} at {error.position}")
        io.write_text("\n".join(lines) + "\n", "-")
    return 0 if all(error is None for _, error in errors) else 2


def _command_filter(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    try:
        patterns = io.read_patterns(args.patterns)
        texts = io.read_items(args.texts)
    except (OSError, ValueError) as exc:
        parser.error(str(exc))
    logger.info("read %d patterns from %s and %d texts from %s", len(patterns), args.patterns, len(texts), args.texts)
    if args.strict:
        _ensure_valid(parser, patterns)
    kept = filter_texts(patterns, texts, mode=args.mode)
    if args.format == "json":
        io.write_json({"mode": args.mode, "matches": kept}, args.out)
    elif kept:
        io.write_text("\n".join(kept) + "\n", args.out)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)
    command = args.command
    if command == "match":
        return _command_match(parser, args)
    if command == "validate":
        return _command_validate(args)
    if command == "filter":
        return _command_filter(parser, args)
    parser.error(f"unknown command {command}")
    return 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
